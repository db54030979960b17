import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from blogful.errors import ArticleNotFound
from blogful.models import Article
from blogful.schemas import ArticleDraft, ArticlePatch

logger = logging.getLogger(__name__)

# ids are a 32-bit INTEGER column on every backend
MAX_ARTICLE_ID = 2**31 - 1


class ArticleStore:
    """Access to the articles table through one SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Article]:
        return self.db.query(Article).order_by(Article.id).all()

    def get_by_id(self, article_id: int) -> Article:
        if not 1 <= article_id <= MAX_ARTICLE_ID:
            raise ArticleNotFound(article_id)
        article = self.db.query(Article).filter(Article.id == article_id).first()
        if article is None:
            raise ArticleNotFound(article_id)
        return article

    def insert(self, draft: ArticleDraft) -> Article:
        article = Article(
            title=draft.title,
            style=draft.style,
            content=draft.content,
            date_published=datetime.utcnow(),
        )
        self.db.add(article)
        self.db.commit()
        self.db.refresh(article)
        logger.info("Created article id=%s", article.id)
        return article

    def delete_by_id(self, article_id: int) -> None:
        article = self.get_by_id(article_id)
        self.db.delete(article)
        self.db.commit()
        logger.info("Deleted article id=%s", article_id)

    def update_by_id(self, article_id: int, patch: ArticlePatch) -> Article:
        article = self.get_by_id(article_id)
        changes = patch.model_dump(exclude_none=True)
        for field, value in changes.items():
            setattr(article, field, value)
        self.db.commit()
        self.db.refresh(article)
        logger.info("Updated article id=%s fields=%s", article_id, sorted(changes))
        return article
