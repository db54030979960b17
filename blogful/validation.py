from typing import Any

from blogful.errors import MissingField, NoFieldsProvided
from blogful.schemas import ARTICLE_FIELDS, ArticleDraft, ArticlePatch


def _as_mapping(body: Any) -> dict:
    return body if isinstance(body, dict) else {}


def validate_create(body: Any) -> ArticleDraft:
    """Return the draft, or raise MissingField for the first absent field."""
    body = _as_mapping(body)
    for field in ARTICLE_FIELDS:
        if body.get(field) is None:
            raise MissingField(field)
    return ArticleDraft(**{field: body[field] for field in ARTICLE_FIELDS})


def validate_update(body: Any) -> ArticlePatch:
    """Keep only updatable fields; unknown keys are ignored."""
    body = _as_mapping(body)
    provided = {field: body[field] for field in ARTICLE_FIELDS if body.get(field) is not None}
    if not provided:
        raise NoFieldsProvided()
    return ArticlePatch(**provided)
