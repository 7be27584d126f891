"""Tests for CatalogRepository using a mocked GraphQL client."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from storefront.domain.models import CartItem
from storefront.infrastructure import queries
from storefront.infrastructure.catalog_repository import CatalogRepository
from storefront.infrastructure.storefront_client import StorefrontGraphQLClient, StorefrontGraphQLError


def _make_repo(return_value: dict | None = None) -> tuple[CatalogRepository, MagicMock]:
    """Helper: repository over a mocked client whose ``execute`` returns ``return_value``."""
    client = MagicMock(spec=StorefrontGraphQLClient)
    client.execute.return_value = return_value if return_value is not None else {}
    return CatalogRepository(client), client


def _sent(client: MagicMock) -> tuple[str, dict]:
    """Helper: the (query, variables) pair of the single execute call."""
    client.execute.assert_awaited_once()
    query, variables = client.execute.await_args[0]
    return query, variables


# ---------------------------------------------------------------------------
# get_product
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_product_sends_handle_variable() -> None:
    payload = {"product": {"id": "gid://shopify/Product/1", "handle": "shirt"}}
    repo, client = _make_repo(payload)

    result = await repo.get_product("shirt")

    query, variables = _sent(client)
    assert result == payload
    assert query is queries.PRODUCT_BY_HANDLE
    assert variables == {"handle": "shirt"}


def test_product_query_fetches_fixed_page_sizes() -> None:
    assert "images(first: 10)" in queries.PRODUCT_BY_HANDLE
    assert "variants(first: 100)" in queries.PRODUCT_BY_HANDLE
    assert "selectedOptions" in queries.PRODUCT_BY_HANDLE


# ---------------------------------------------------------------------------
# get_collection
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_collection_defaults_first_to_20() -> None:
    repo, client = _make_repo()

    await repo.get_collection("summer")

    query, variables = _sent(client)
    assert query is queries.COLLECTION_BY_HANDLE
    assert variables == {"handle": "summer", "first": 20}


@pytest.mark.asyncio
async def test_get_collection_passes_explicit_first() -> None:
    repo, client = _make_repo()

    await repo.get_collection("summer", first=5)

    _, variables = _sent(client)
    assert variables["first"] == 5


def test_collection_query_requests_cursors() -> None:
    for field in ("hasNextPage", "hasPreviousPage", "startCursor", "endCursor"):
        assert field in queries.COLLECTION_BY_HANDLE


# ---------------------------------------------------------------------------
# search_products
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_search_products_passes_query_text_through() -> None:
    repo, client = _make_repo()

    await repo.search_products('title:"red shirt" AND vendor:Acme')

    query, variables = _sent(client)
    assert query is queries.SEARCH_PRODUCTS
    assert variables == {"query": 'title:"red shirt" AND vendor:Acme', "first": 20}


def test_search_query_has_no_cursors() -> None:
    assert "hasNextPage" in queries.SEARCH_PRODUCTS
    assert "startCursor" not in queries.SEARCH_PRODUCTS
    assert "endCursor" not in queries.SEARCH_PRODUCTS


def test_documents_take_page_sizes_as_variables() -> None:
    assert "products(first: $first)" in queries.COLLECTION_BY_HANDLE
    assert "products(first: $first, query: $query)" in queries.SEARCH_PRODUCTS


# ---------------------------------------------------------------------------
# create_cart
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_cart_builds_lines_variable() -> None:
    repo, client = _make_repo()

    await repo.create_cart([CartItem(variant_id="gid://shopify/ProductVariant/1", quantity=2)])

    query, variables = _sent(client)
    assert query is queries.CART_CREATE
    assert variables == {"lines": [{"variantId": "gid://shopify/ProductVariant/1", "quantity": 2}]}


@pytest.mark.asyncio
async def test_create_cart_empty_items_sends_zero_lines() -> None:
    repo, client = _make_repo()

    await repo.create_cart([])

    _, variables = _sent(client)
    assert variables == {"lines": []}


@pytest.mark.asyncio
async def test_create_cart_accepts_mappings_and_keeps_order() -> None:
    repo, client = _make_repo()

    await repo.create_cart(
        [
            {"variantId": "gid://shopify/ProductVariant/2", "quantity": 1},
            {"variant_id": "gid://shopify/ProductVariant/1", "quantity": 3},
        ]
    )

    _, variables = _sent(client)
    assert [line["variantId"] for line in variables["lines"]] == [
        "gid://shopify/ProductVariant/2",
        "gid://shopify/ProductVariant/1",
    ]
    assert variables["lines"][1]["quantity"] == 3


@pytest.mark.asyncio
async def test_create_cart_rejects_negative_quantity() -> None:
    repo, client = _make_repo()

    with pytest.raises(ValidationError):
        await repo.create_cart([{"variantId": "gid://shopify/ProductVariant/1", "quantity": -1}])

    client.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_cart_returns_user_errors_as_data() -> None:
    payload = {
        "cartCreate": {
            "cart": None,
            "userErrors": [{"field": ["input", "lines", "0"], "message": "Variant not found"}],
        }
    }
    repo, _ = _make_repo(payload)

    result = await repo.create_cart([CartItem(variant_id="gid://shopify/ProductVariant/999", quantity=1)])

    assert result["cartCreate"]["userErrors"][0]["message"] == "Variant not found"


@pytest.mark.asyncio
async def test_catalog_propagates_graphql_errors() -> None:
    client = MagicMock(spec=StorefrontGraphQLClient)
    client.execute.side_effect = StorefrontGraphQLError([])

    with pytest.raises(StorefrontGraphQLError):
        await CatalogRepository(client).get_product("shirt")
