from typing import Optional, Sequence

from content.domain.entities.content import CountsByType
from content.domain.entities.content_type import ContentTypeDescriptor
from content.domain.models.content import ContentStatus
from content.services.content_service import ContentService

ATTACHMENT = "attachment"


def counted_status(content_type: str) -> ContentStatus:
    # attachments never get "publish"; they inherit their parent's status
    if content_type == ATTACHMENT:
        return ContentStatus.inherit
    return ContentStatus.publish


async def aggregate_counts(
    content: ContentService,
    content_types: Optional[Sequence[ContentTypeDescriptor]] = None,
) -> CountsByType:
    """
    One count per public content type: its inherited items for attachments,
    its published items for everything else.

    `content_types` defaults to the host's public types at call time.
    """
    if content_types is None:
        content_types = await content.list_content_types(public=True)

    counts: CountsByType = {}
    for content_type in content_types:
        if not content_type.is_public:
            continue
        by_status = await content.count_by_status(content_type.name)
        counts[content_type.name] = max(by_status.get(counted_status(content_type.name)), 0)
    return counts
