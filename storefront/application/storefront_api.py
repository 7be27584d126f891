from collections.abc import Iterable, Mapping
from types import TracebackType
from typing import Any

import httpx
from loguru import logger

from storefront.domain.interfaces import ICatalogRepository
from storefront.domain.models import CartItem, StorefrontConfig
from storefront.infrastructure.catalog_repository import CatalogRepository
from storefront.infrastructure.storefront_client import StorefrontGraphQLClient


class StorefrontApi:
    """Entry point for host code: one shop, one config, independent async calls.

    ``client`` is the ``httpx.AsyncClient`` requests go through. When omitted
    a default one is created and closed again by ``aclose()``; an injected
    client is left open for its owner to close.
    """

    def __init__(
        self,
        shop_domain: str,
        access_token: str,
        api_version: str,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        logger.info(f"Initializing Storefront API client for: {shop_domain}")
        self._config = StorefrontConfig(
            shop_domain=shop_domain,
            access_token=access_token,
            api_version=api_version,
        )
        self._owns_client = client is None
        self._http = client if client is not None else httpx.AsyncClient(timeout=None)
        self._graphql = StorefrontGraphQLClient(self._config, self._http)
        self._catalog: ICatalogRepository = CatalogRepository(self._graphql)

    @property
    def config(self) -> StorefrontConfig:
        return self._config

    async def execute(self, query: str, variables: Any | None = None) -> Any:
        """Run an arbitrary GraphQL document and return its ``data``."""
        return await self._graphql.execute(query, variables)

    async def get_product(self, handle: str) -> Any:
        return await self._catalog.get_product(handle)

    async def get_collection(self, handle: str, first: int = CatalogRepository.DEFAULT_PAGE_SIZE) -> Any:
        return await self._catalog.get_collection(handle, first)

    async def search_products(self, query: str, first: int = CatalogRepository.DEFAULT_PAGE_SIZE) -> Any:
        return await self._catalog.search_products(query, first)

    async def create_cart(self, items: Iterable[CartItem | Mapping]) -> Any:
        """Create a cart. Check ``cartCreate.userErrors`` in the result; they do not raise."""
        return await self._catalog.create_cart(items)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "StorefrontApi":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
