from content.domain.entities.content_type import ContentTypeDescriptor, BUILTIN_CONTENT_TYPES
from content.domain.entities.content import ContentItem, StatusCounts, CountsByType
from content.domain.entities.query import ContentQuery, QueryResult

__all__ = [
    "ContentTypeDescriptor",
    "BUILTIN_CONTENT_TYPES",
    "ContentItem",
    "StatusCounts",
    "CountsByType",
    "ContentQuery",
    "QueryResult",
]
