from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from .models import CartItem


class IGraphQLExecutor(Protocol):
    async def execute(self, query: str, variables: Any | None = None) -> Any: ...


class ICatalogRepository(Protocol):
    async def get_product(self, handle: str) -> Any: ...

    async def get_collection(self, handle: str, first: int = 20) -> Any: ...

    async def search_products(self, query: str, first: int = 20) -> Any: ...

    async def create_cart(self, items: Iterable[CartItem | Mapping]) -> Any:
        """Create a cart and return the raw ``cartCreate`` payload, ``userErrors`` included."""
        ...
