from content.domain.models.content_type import ContentType
from content.domain.models.term import Term, Taxonomy, content_terms
from content.domain.models.content import Content, ContentStatus, EXCLUDED_FROM_SEARCH

__all__ = [
    "ContentType",
    "Term",
    "Taxonomy",
    "content_terms",
    "Content",
    "ContentStatus",
    "EXCLUDED_FROM_SEARCH",
]
