from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.orm import Session

from blogful.db import get_db
from blogful.sanitize import sanitize_article
from blogful.schemas import ArticleOut, ErrorResponse
from blogful.store import ArticleStore
from blogful.validation import validate_create, validate_update

router = APIRouter(prefix="/articles", tags=["articles"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def get_store(db: Session = Depends(get_db)) -> ArticleStore:
    return ArticleStore(db)


@router.get("", response_model=List[ArticleOut])
def list_articles(store: ArticleStore = Depends(get_store)):
    return [sanitize_article(a) for a in store.list_all()]


@router.get("/{article_id}", response_model=ArticleOut, responses=NOT_FOUND)
def get_article(article_id: int, store: ArticleStore = Depends(get_store)):
    return sanitize_article(store.get_by_id(article_id))


@router.post(
    "",
    response_model=ArticleOut,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
def create_article(
    request: Request,
    response: Response,
    body: Any = Body(None),
    store: ArticleStore = Depends(get_store),
):
    draft = validate_create(body)
    article = store.insert(draft)
    response.headers["Location"] = request.url_for("get_article", article_id=article.id).path
    return sanitize_article(article)


@router.delete(
    "/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_article(article_id: int, store: ArticleStore = Depends(get_store)):
    store.delete_by_id(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def update_article(
    article_id: int,
    body: Any = Body(None),
    store: ArticleStore = Depends(get_store),
):
    patch = validate_update(body)
    store.update_by_id(article_id, patch)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
