from typing import Optional, Sequence

from content.domain.entities.content import CountsByType
from content.domain.entities.content_type import ContentTypeDescriptor
from content.domain.entities.query import QueryResult
from blocks.rendering import get_environment

TEXT_DOMAIN = "site-counts"
TEMPLATE = "site_counts.html"


def render(
    content_types: Sequence[ContentTypeDescriptor],
    counts: CountsByType,
    result: QueryResult,
    current_id: Optional[int],
    class_name: str = "",
) -> str:
    """
    Markup of the Site Counts block. Every interpolated value is escaped by
    the template environment; a missing current id prints as 0.
    """
    template = get_environment(__package__, TEXT_DOMAIN).get_template(TEMPLATE)
    return template.render(
        class_name=class_name or "",
        content_types=[ct for ct in content_types if ct.name in counts],
        counts=counts,
        current_id=current_id or 0,
        result=result,
    )
