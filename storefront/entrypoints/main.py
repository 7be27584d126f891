import argparse
import asyncio
import json
import sys
from collections.abc import Sequence
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from storefront.application.storefront_api import StorefrontApi
from storefront.domain.models import CartItem
from storefront.entrypoints.settings import Config
from storefront.infrastructure.storefront_client import StorefrontError


def _non_empty(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("must not be empty")
    return value


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _json_value(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid JSON: {exc}") from exc


def _cart_line(value: str) -> CartItem:
    """Parse ``<variant id>[:<quantity>]``; the quantity defaults to 1."""
    variant_id, sep, quantity = value.rpartition(":")
    if not sep or not quantity.isdigit():
        variant_id, quantity = value, "1"
    if not variant_id:
        raise argparse.ArgumentTypeError("variant id must not be empty")
    return CartItem(variant_id=variant_id, quantity=int(quantity))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storefront", description="Query the Shopify Storefront API."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    query = commands.add_parser("query", help="Execute a raw GraphQL document")
    query.add_argument("document", type=_non_empty, help="GraphQL query string")
    query.add_argument("--variables", type=_json_value, default=None, help="Variables as JSON")

    product = commands.add_parser("product", help="Get a product by handle")
    product.add_argument("handle", type=_non_empty)

    collection = commands.add_parser("collection", help="Get a collection by handle")
    collection.add_argument("handle", type=_non_empty)
    collection.add_argument("--first", type=_positive_int, default=20, help="Number of products to fetch")

    search = commands.add_parser("search", help="Search products")
    search.add_argument("text", type=_non_empty, help="Search query")
    search.add_argument("--first", type=_positive_int, default=20, help="Number of results")

    cart = commands.add_parser("cart", help="Create a cart")
    cart.add_argument(
        "lines", nargs="*", type=_cart_line, metavar="VARIANT_ID[:QTY]",
        help="Variant GID, optionally followed by ':<quantity>'",
    )
    return parser


async def run(api: StorefrontApi, args: argparse.Namespace) -> Any:
    """Dispatch the parsed command to ``api`` and return the ``data`` payload."""
    match args.command:
        case "query":
            return await api.execute(args.document, args.variables)
        case "product":
            return await api.get_product(args.handle)
        case "collection":
            return await api.get_collection(args.handle, args.first)
        case "search":
            return await api.search_products(args.text, args.first)
        case "cart":
            return await api.create_cart(args.lines)
    raise ValueError(f"Unknown command: {args.command}")


async def _run_with_config(args: argparse.Namespace) -> Any:
    config = Config()  # type: ignore[call-arg]
    async with StorefrontApi(
        shop_domain=config.SHOPIFY_STORE_DOMAIN,
        access_token=config.SHOPIFY_STOREFRONT_TOKEN.get_secret_value(),
        api_version=config.SHOPIFY_API_VERSION,
    ) as api:
        return await run(api, args)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        data = asyncio.run(_run_with_config(args))
    except ValidationError as exc:
        # field names and messages only; the inputs hold the raw environment
        problems = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors(include_input=False)
        )
        logger.error(f"Invalid configuration: {problems}")
        return 1
    except (StorefrontError, httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.error(f"Storefront request failed: {type(exc).__name__}: {exc}")
        return 1

    print(json.dumps(data, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
