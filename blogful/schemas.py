from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

ARTICLE_FIELDS = ("title", "style", "content")


class ArticleDraft(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str
    style: str
    content: str


class ArticlePatch(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: Optional[str] = None
    style: Optional[str] = None
    content: Optional[str] = None


class ArticleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    style: str
    content: str
    date_published: datetime


class ErrorDetail(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail
