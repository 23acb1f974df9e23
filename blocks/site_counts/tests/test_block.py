import pytest
from sqlalchemy.exc import OperationalError

from blocks import register_blocks
from blocks.registry import BlockContext, BlockRegistry
from content.domain.entities import ContentTypeDescriptor, QueryResult, StatusCounts

BLOCK = "site-counts/site-counts"


# ---------------------------
# Helpers
# ---------------------------

class _FailingContent:
    """Host read API where one call fails the way a dropped database connection does."""

    def __init__(self, failing: str):
        self.failing = failing
        self.calls: dict[str, int] = {}

    def _call(self, name: str):
        self.calls[name] = self.calls.get(name, 0) + 1
        if name == self.failing:
            raise OperationalError("SELECT ...", {}, Exception("server closed the connection"))

    async def list_content_types(self, public=None):
        self._call("list_content_types")
        return [ContentTypeDescriptor(name="post", is_public=True, label="Posts")]

    async def count_by_status(self, content_type):
        self._call("count_by_status")
        return StatusCounts(publish=1)

    async def query(self, query):
        self._call("query")
        return QueryResult(query=query)


@pytest.fixture
def registry():
    r = BlockRegistry()
    register_blocks(r)
    r.lock()
    yield r
    r.clear()


# ==============================================================================
# Host failures
# ==============================================================================

@pytest.mark.asyncio
@pytest.mark.parametrize("failing", ["list_content_types", "count_by_status", "query"])
async def test_should_abort_render_when_host_call_fails(registry, failing):
    # GIVEN
    content = _FailingContent(failing)

    # WHEN / THEN
    with pytest.raises(OperationalError):
        await registry.render(BLOCK, {}, "", BlockContext(content=content, post_id=1))

    assert content.calls[failing] == 1           # -> tried once, no retry


@pytest.mark.asyncio
async def test_should_not_query_listing_after_counting_fails(registry):
    content = _FailingContent("count_by_status")

    with pytest.raises(OperationalError):
        await registry.render(BLOCK, {}, "", BlockContext(content=content, post_id=1))

    assert "query" not in content.calls          # -> nothing rendered from a partial result


@pytest.mark.asyncio
async def test_should_render_when_host_calls_succeed(registry):
    content = _FailingContent("nothing")

    html = await registry.render(BLOCK, {"className": "wide"}, "", BlockContext(content=content, post_id=3))

    assert html.startswith('<div class="wide">')
    assert "There are 1 Posts." in html
    assert content.calls == {"list_content_types": 1, "count_by_status": 1, "query": 1}
