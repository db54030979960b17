import os
from datetime import datetime

import pytest

# Configure environment before importing the app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from fastapi.testclient import TestClient

from blogful.db import SessionLocal, engine
from blogful.main import app
from blogful.models import Article, Base


def make_articles_array():
    return [
        {
            "id": 1,
            "date_published": datetime(2029, 1, 22, 16, 28, 32, 615000),
            "title": "First test post!",
            "style": "How-to",
            "content": "Lorem ipsum dolor sit amet, consectetur adipisicing elit. Natus consequuntur deserunt commodi.",
        },
        {
            "id": 2,
            "date_published": datetime(2100, 5, 22, 16, 28, 32, 615000),
            "title": "Second test post!",
            "style": "News",
            "content": "Lorem ipsum dolor sit amet consectetur adipisicing elit. Cum, exercitationem cupiditate dignissimos.",
        },
        {
            "id": 3,
            "date_published": datetime(1919, 12, 22, 16, 28, 32, 615000),
            "title": "Third test post!",
            "style": "Listicle",
            "content": "Lorem ipsum dolor sit amet consectetur adipisicing elit. Possimus, voluptate? Necessitatibus.",
        },
        {
            "id": 4,
            "date_published": datetime(1919, 12, 22, 16, 28, 32, 615000),
            "title": "Fourth test post!",
            "style": "Story",
            "content": "Lorem ipsum dolor sit amet consectetur adipisicing elit. Earum molestiae accusamus veniam.",
        },
    ]


def make_malicious_article():
    return {
        "id": 911,
        "date_published": datetime.utcnow(),
        "style": "How-to",
        "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "content": 'Bad image <img src="https://url.to.file.which/does-not.exist" onerror="alert(document.cookie);">. But not <strong>all</strong> bad.',
    }


SAFE_TITLE = 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;'
SAFE_CONTENT = 'Bad image <img src="https://url.to.file.which/does-not.exist">. But not <strong>all</strong> bad.'


def as_json(article: dict) -> dict:
    return {**article, "date_published": article["date_published"].isoformat()}


def insert_articles(rows):
    db = SessionLocal()
    try:
        db.add_all([Article(**row) for row in rows])
        db.commit()
    finally:
        db.close()


@pytest.fixture(autouse=True)
def clean_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def test_articles():
    articles = make_articles_array()
    insert_articles(articles)
    return articles


@pytest.fixture
def malicious_article():
    article = make_malicious_article()
    insert_articles([article])
    return article
