from collections.abc import Iterable, Mapping
from typing import Any

from storefront.domain.interfaces import IGraphQLExecutor
from storefront.domain.models import CartItem
from storefront.infrastructure import queries


class CatalogRepository:
    """Storefront operations expressed as fixed GraphQL documents.

    Each method only assembles variables and hands the document to the
    executor; results are the raw ``data`` payloads.
    """

    # Shopify allows up to 250; 20 matches the storefront listing default
    DEFAULT_PAGE_SIZE = 20

    def __init__(self, client: IGraphQLExecutor) -> None:
        self._client = client

    async def get_product(self, handle: str) -> Any:
        """Return the product matching ``handle`` with up to 10 images and 100 variants."""
        return await self._client.execute(queries.PRODUCT_BY_HANDLE, {"handle": handle})

    async def get_collection(self, handle: str, first: int = DEFAULT_PAGE_SIZE) -> Any:
        """Return the collection ``handle`` with its first ``first`` products and ``pageInfo``."""
        variables: dict = {"handle": handle, "first": first}
        return await self._client.execute(queries.COLLECTION_BY_HANDLE, variables)

    async def search_products(self, query: str, first: int = DEFAULT_PAGE_SIZE) -> Any:
        """Run a free-text product search. ``query`` uses Shopify's search syntax as-is."""
        variables: dict = {"query": query, "first": first}
        return await self._client.execute(queries.SEARCH_PRODUCTS, variables)

    async def create_cart(self, items: Iterable[CartItem | Mapping]) -> Any:
        """Create a cart with one line per item, in order.

        ``userErrors`` come back inside the returned payload and are left
        for the caller to inspect. An empty ``items`` is sent unchanged.
        """
        lines = [self._to_cart_item(item).to_line() for item in items]
        return await self._client.execute(queries.CART_CREATE, {"lines": lines})

    @staticmethod
    def _to_cart_item(item: CartItem | Mapping) -> CartItem:
        if isinstance(item, CartItem):
            return item
        return CartItem.model_validate(dict(item))
