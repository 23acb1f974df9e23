import pytest

from content.domain.entities.content_type import ContentTypeDescriptor
from content.domain.models import ContentStatus
from blocks.site_counts.aggregator import aggregate_counts, counted_status


# ==============================================================================
# Status selection
# ==============================================================================

def test_should_count_inherited_items_for_attachments():
    assert counted_status("attachment") == ContentStatus.inherit

@pytest.mark.parametrize("name", ["post", "page", "product"])
def test_should_count_published_items_for_other_types(name):
    assert counted_status(name) == ContentStatus.publish


# ==============================================================================
# Aggregation over the content store
# ==============================================================================

@pytest.mark.asyncio
async def test_should_return_one_entry_per_public_type(services, content_types):
    # GIVEN: built-in types, three public (post, page, attachment)

    # WHEN
    counts = await aggregate_counts(services)

    # THEN
    assert counts == {"post": 0, "page": 0, "attachment": 0}   # -> no private types, zeros when empty


@pytest.mark.asyncio
async def test_should_select_status_count_per_type(services, content_types, add_content):
    # GIVEN: post 3 published, page 1 published, attachment 2 inherited
    for i in range(3):
        await add_content(f"Post {i}")
    await add_content("About", content_type="page")
    await add_content("photo.jpg", content_type="attachment", status=ContentStatus.inherit)
    await add_content("scan.pdf", content_type="attachment", status=ContentStatus.inherit)
    # noise that must not be counted
    await add_content("Draft post", status=ContentStatus.draft)
    await add_content("Trashed page", content_type="page", status=ContentStatus.trash)
    await add_content("odd.png", content_type="attachment", status=ContentStatus.publish)
    await add_content("Rev", content_type="revision", status=ContentStatus.inherit)

    # WHEN
    counts = await aggregate_counts(services)

    # THEN
    assert counts == {"post": 3, "page": 1, "attachment": 2}


@pytest.mark.asyncio
async def test_should_include_public_types_registered_later(services, content_types, add_content):
    # GIVEN
    await services.ensure_content_types([
        ContentTypeDescriptor(name="product", is_public=True, label="Products"),
        ContentTypeDescriptor(name="log", is_public=False, label="Logs"),
    ])
    await add_content("Widget", content_type="product")

    # WHEN
    counts = await aggregate_counts(services)

    # THEN
    assert set(counts) == {"post", "page", "attachment", "product"}
    assert counts["product"] == 1


@pytest.mark.asyncio
async def test_should_skip_non_public_descriptors_when_given_explicitly(services, content_types, add_content):
    # GIVEN
    await add_content("Post")
    given = [
        ContentTypeDescriptor(name="post", is_public=True, label="Posts"),
        ContentTypeDescriptor(name="revision", is_public=False, label="Revisions"),
    ]

    # WHEN
    counts = await aggregate_counts(services, given)

    # THEN
    assert counts == {"post": 1}
