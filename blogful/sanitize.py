"""HTML cleaning for article text leaving the service.

Titles never carry markup: every tag is escaped. Content keeps a small set of
formatting tags; anything else, ``<script>`` included, is escaped and
event-handler attributes are dropped. Both cleaners are idempotent, so text
that was already cleaned when written comes back unchanged when read.
"""

from bleach.sanitizer import Cleaner

from blogful.models import Article
from blogful.schemas import ArticleOut

CONTENT_TAGS = frozenset(
    {
        "a", "b", "blockquote", "br", "code", "em",
        "h1", "h2", "h3", "h4", "h5", "h6",
        "i", "img", "li", "ol", "p", "pre", "strong", "u", "ul",
    }
)
CONTENT_ATTRIBUTES = {
    "a": ["href", "title"],
    "img": ["src", "alt", "title", "width", "height"],
}
PROTOCOLS = frozenset({"http", "https", "mailto"})

_title_cleaner = Cleaner(tags=frozenset(), attributes={}, strip=False)
_content_cleaner = Cleaner(
    tags=CONTENT_TAGS,
    attributes=CONTENT_ATTRIBUTES,
    protocols=PROTOCOLS,
    strip=False,
)


def sanitize_title(text: str) -> str:
    return _title_cleaner.clean(text)


def sanitize_content(text: str) -> str:
    return _content_cleaner.clean(text)


def sanitize_article(article: Article) -> ArticleOut:
    out = ArticleOut.model_validate(article)
    return out.model_copy(
        update={
            "title": sanitize_title(out.title),
            "content": sanitize_content(out.content),
        }
    )
