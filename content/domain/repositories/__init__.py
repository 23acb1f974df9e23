from content.domain.repositories.content_repository import ContentRepository
from content.domain.repositories.content_type_repository import ContentTypeRepository
from content.domain.repositories.term_repository import TermRepository

__all__ = ["ContentRepository", "ContentTypeRepository", "TermRepository"]
