import httpx
import pytest

from brand_guide.services.page_fetcher import USER_AGENT, PageFetcher
from brand_guide.utils.errors import PageFetchError


def fetcher_for(handler, settings):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PageFetcher(settings, client=client), client


@pytest.mark.asyncio
async def test_fetch_returns_body_with_user_agent(mock_settings, sample_html):
    seen = {}

    def handler(request):
        seen["user_agent"] = request.headers["User-Agent"]
        return httpx.Response(200, text=sample_html)

    fetcher, client = fetcher_for(handler, mock_settings)
    async with client:
        html = await fetcher.fetch("https://acme.example")

    assert html == sample_html
    assert seen["user_agent"] == USER_AGENT


@pytest.mark.asyncio
async def test_fetch_follows_redirects(mock_settings):
    def handler(request):
        if request.url.path == "/":
            return httpx.Response(301, headers={"Location": "https://acme.example/home"})
        return httpx.Response(200, text="<h1>Home</h1>")

    fetcher, client = fetcher_for(handler, mock_settings)
    async with client:
        assert await fetcher.fetch("https://acme.example/") == "<h1>Home</h1>"


@pytest.mark.asyncio
async def test_non_2xx_raises_with_status(mock_settings):
    fetcher, client = fetcher_for(lambda request: httpx.Response(404), mock_settings)

    async with client:
        with pytest.raises(PageFetchError) as exc_info:
            await fetcher.fetch("https://acme.example/missing")

    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Failed to fetch URL: 404 Not Found"


@pytest.mark.asyncio
async def test_network_failure_raises(mock_settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    fetcher, client = fetcher_for(handler, mock_settings)
    async with client:
        with pytest.raises(PageFetchError, match="connection refused") as exc_info:
            await fetcher.fetch("https://acme.example")

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_injected_client_not_closed(mock_settings):
    fetcher, client = fetcher_for(lambda request: httpx.Response(200, text="ok"), mock_settings)

    async with fetcher:
        await fetcher.fetch("https://acme.example")

    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_owned_client_lifecycle(mock_settings):
    fetcher = PageFetcher(mock_settings)
    async with fetcher:
        assert fetcher._client is not None
        assert fetcher._client.headers["User-Agent"] == USER_AGENT
    assert fetcher._client is None
