import json
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from storefront.domain.models import GraphQLError, GraphQLRequest, GraphQLResponse, StorefrontConfig
from storefront.shared.decorators import log_errors


class StorefrontError(Exception):
    """Base class for errors raised by this package (never for transport failures)."""


class StorefrontEncodeError(StorefrontError):
    """Raised when the request variables cannot be serialized to JSON."""


class StorefrontDecodeError(StorefrontError):
    """Raised when the response body is not JSON or not a GraphQL envelope."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StorefrontGraphQLError(StorefrontError):
    """Raised when the Storefront API returns a non-empty top-level ``errors`` array."""

    def __init__(self, errors: list[GraphQLError]) -> None:
        super().__init__(", ".join(error.message for error in errors))
        self.errors = errors


class StorefrontGraphQLClient:
    """Thin httpx wrapper for the Shopify Storefront GraphQL API.

    The ``httpx.AsyncClient`` is injected so callers decide on timeouts,
    proxies, or a ``MockTransport``. Transport failures (``httpx.HTTPError``)
    are not caught here and reach the caller unchanged.
    """

    def __init__(self, config: StorefrontConfig, client: httpx.AsyncClient) -> None:
        self._config = config
        self._client = client

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Shopify-Storefront-Access-Token": self._config.access_token.get_secret_value(),
        }

    @log_errors
    async def execute(self, query: str, variables: Any | None = None) -> Any:
        """POST a GraphQL document and return the ``data`` payload.

        ``variables`` of ``None`` leaves the key out of the request body.

        Raises:
            httpx.HTTPError: when the request could not be sent or the response not read.
            httpx.InvalidURL: when the shop domain does not form a valid URL.
            StorefrontEncodeError: if ``variables`` cannot be serialized to JSON.
            StorefrontDecodeError: if the body is not a ``{data, errors}`` envelope.
            StorefrontGraphQLError: if the envelope carries a non-empty ``errors`` array.
        """
        request = GraphQLRequest(query=query, variables=variables)
        payload = request.to_payload()

        logger.debug(
            f"[Storefront] POST {self.endpoint} (variables: {'variables' in payload})"
        )
        try:
            content = json.dumps(payload, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise StorefrontEncodeError(
                f"Request body could not be encoded: {type(exc).__name__}: {exc}"
            ) from exc

        response = await self._client.post(
            self.endpoint, headers=self._headers(), content=content
        )

        envelope = self.decode(response)
        logger.debug(
            f"[Storefront] {response.status_code} | "
            f"data: {envelope.data is not None} | errors: {len(envelope.errors or [])}"
        )
        return self.resolve(envelope)

    @staticmethod
    def decode(response: httpx.Response) -> GraphQLResponse:
        """Parse ``response`` into a ``GraphQLResponse``.

        The HTTP status is not checked: the Storefront API reports most
        failures inside the JSON body, which is what gets decoded.
        """
        try:
            body = response.json()
        except ValueError as exc:
            raise StorefrontDecodeError(
                f"Response body is not valid JSON (HTTP {response.status_code}): {exc}",
                status_code=response.status_code,
            ) from exc

        try:
            return GraphQLResponse.model_validate(body)
        except ValidationError as exc:
            raise StorefrontDecodeError(
                f"Response body is not a GraphQL envelope (HTTP {response.status_code}): "
                f"{exc.error_count()} validation error(s)",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def resolve(envelope: GraphQLResponse) -> Any:
        """Turn a decoded envelope into the call result.

        Any top-level error fails the whole call and the partial ``data`` is
        dropped. An absent or null ``data`` with no errors yields ``None``.
        """
        if envelope.errors:
            raise StorefrontGraphQLError(envelope.errors)
        return envelope.data
