"""Async client for the JustCMS public API.

Every retrieval method issues exactly one GET against
``https://api.justcms.co/public/{project_id}/...`` and returns the decoded
response as pydantic models.
"""

import time
from typing import Any

import httpx
from pydantic import TypeAdapter

from .common import utils
from .common.schemas import (
    CategoriesResponse,
    Category,
    Layout,
    Menu,
    PageDetail,
    PageFilters,
    PagesResponse,
)
from .core.config import ClientConfig, resolve_config
from .core.exceptions import APIError
from .core.logging import get_logger

logger = get_logger(__name__)

_layouts_adapter = TypeAdapter(list[Layout])

# Separator for fetching several layouts in one request
LAYOUT_ID_SEPARATOR = ";"


class JustCMSClient:
    """Client bound to one JustCMS project.

    Holds only its resolved config and an HTTP connection pool, so one
    instance can serve concurrent requests.

    Usage:
        async with create_client() as cms:
            categories = await cms.get_categories()
            page = await cms.get_page_by_slug("about-us")
    """

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient | None = None):
        """
        Args:
            config: Resolved token and project id (see resolve_config)
            http_client: Optional client to send requests with. The caller keeps
                ownership of it and is responsible for closing it; timeouts and
                other transport policy belong there.
                Without one, the client creates its own that follows redirects
                and has no timeout.
        """
        self.config = config
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def project_id(self) -> str:
        return self.config.project_id

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client.

        Raises:
            RuntimeError: If the client passed in by the caller has been closed
        """
        if not self._owns_client:
            if self._client.is_closed:
                raise RuntimeError("The http_client given to JustCMSClient is closed")
            return self._client
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=None, follow_redirects=True)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        if self._owns_client:
            self._client = None

    async def __aenter__(self) -> "JustCMSClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    def build_url(self, endpoint: str = "") -> str:
        """Build the request URL for an endpoint (e.g. 'pages' or 'menus/main')."""
        url = self.config.project_url
        return f"{url}/{endpoint}" if endpoint else url

    async def _get(self, endpoint: str = "", params: dict[str, Any] | None = None) -> Any:
        """Perform a GET request against a JustCMS endpoint.

        Args:
            endpoint: Path below the project root, empty for the root itself
            params: Query parameters; None values are dropped

        Returns:
            The decoded JSON body

        Raises:
            APIError: If the response status is not 2xx
            httpx.HTTPError: If the request could not be sent
        """
        query = {key: str(value) for key, value in (params or {}).items() if value is not None}
        url = self.build_url(endpoint)
        client = self._get_client()

        started = time.perf_counter()
        response = await client.get(url, params=query, headers=self.config.auth_headers())
        duration_ms = round((time.perf_counter() - started) * 1000, 1)

        log_context = {
            "endpoint": endpoint,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        }

        if not response.is_success:
            logger.warning(
                f"JustCMS request failed: GET {response.url} -> {response.status_code}",
                extra=log_context,
            )
            raise APIError(response.status_code, response.text)

        logger.debug(f"GET {response.url}", extra=log_context)
        return response.json()

    # -------------------------------------------------------------------------
    # Retrieval
    # -------------------------------------------------------------------------

    async def get_categories(self) -> list[Category]:
        """Retrieve all categories of the project."""
        data = await self._get()
        return CategoriesResponse.model_validate(data).categories

    async def get_pages(
        self,
        filters: PageFilters | None = None,
        start: int | None = None,
        offset: int | None = None,
    ) -> PagesResponse:
        """Retrieve pages with optional filtering and pagination.

        Omitted arguments are not sent, leaving the API's defaults in place.

        Args:
            filters: Optional filters (e.g. PageFilters.by_category("blog"))
            start: Index of the first page to return
            offset: Number of pages to return

        Returns:
            The requested window of pages and the total number of matches
        """
        query: dict[str, Any] = {}
        if filters is not None:
            query.update(filters.to_query())
        if start is not None:
            query["start"] = start
        if offset is not None:
            query["offset"] = offset

        data = await self._get("pages", query)
        return PagesResponse.model_validate(data)

    async def get_page_by_slug(self, slug: str, version: str | None = None) -> PageDetail:
        """Retrieve a single page by its slug.

        Args:
            slug: The page slug
            version: Optional version (e.g. 'draft')
        """
        query = {}
        if version:
            query["v"] = version

        data = await self._get(f"pages/{slug}", query)
        return PageDetail.model_validate(data)

    async def get_menu_by_id(self, menu_id: str) -> Menu:
        """Retrieve a menu and its item tree."""
        data = await self._get(f"menus/{menu_id}")
        return Menu.model_validate(data)

    async def get_layout_by_id(self, layout_id: str) -> Layout:
        """Retrieve a single layout."""
        data = await self._get(f"layouts/{layout_id}")
        return Layout.model_validate(data)

    async def get_layouts_by_ids(self, layout_ids: list[str]) -> list[Layout]:
        """Retrieve several layouts in one request, in the order given."""
        data = await self._get(f"layouts/{LAYOUT_ID_SEPARATOR.join(layout_ids)}")
        return _layouts_adapter.validate_python(data)

    # -------------------------------------------------------------------------
    # Helpers (no I/O)
    # -------------------------------------------------------------------------

    is_block_has_style = staticmethod(utils.is_block_has_style)
    get_large_image_variant = staticmethod(utils.get_large_image_variant)
    get_first_image = staticmethod(utils.get_first_image)
    has_category = staticmethod(utils.has_category)


def create_client(
    api_token: str | None = None,
    project_id: str | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> JustCMSClient:
    """Create a JustCMS client.

    Uses the given token and project id, falling back to the
    PUBLIC_JUSTCMS_TOKEN and PUBLIC_JUSTCMS_PROJECT environment variables.

    Raises:
        ConfigurationError: If either value cannot be resolved
    """
    config = resolve_config(api_token, project_id)
    logger.debug(f"Created JustCMS client for project {config.project_id}")
    return JustCMSClient(config, http_client=http_client)


# Module-level client instance (created on first use)
_client: JustCMSClient | None = None


def get_client() -> JustCMSClient:
    """Get or create a client configured from the environment.

    The connection pool is bound to the event loop it is first used on;
    call close_client() before that loop ends (e.g. before each asyncio.run
    returns) so the next loop starts with a fresh client.

    Returns:
        JustCMSClient: The shared client instance
    """
    global _client
    if _client is None:
        _client = create_client()
    return _client


async def close_client() -> None:
    """Close the shared client."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
