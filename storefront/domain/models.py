from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator


class StorefrontConfig(BaseModel):
    """Identity of the shop a client talks to. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    shop_domain: str  # e.g. "my-shop.myshopify.com"
    access_token: SecretStr
    api_version: str  # e.g. "2024-01"

    @property
    def endpoint(self) -> str:
        return f"https://{self.shop_domain}/api/{self.api_version}/graphql.json"


class GraphQLRequest(BaseModel):
    """Outbound GraphQL payload."""

    query: str
    variables: Any | None = None

    def to_payload(self) -> dict:
        """Return the JSON body, leaving ``variables`` out when there are none."""
        payload: dict = {"query": self.query}
        if self.variables is not None:
            payload["variables"] = self.variables
        return payload


class ErrorLocation(BaseModel):
    line: int
    column: int


class GraphQLError(BaseModel):
    """One entry of the top-level ``errors`` array."""

    model_config = ConfigDict(extra="allow")

    message: str
    locations: list[ErrorLocation] | None = None
    path: list[str | int] | None = None


class GraphQLResponse(BaseModel):
    """The ``{data, errors}`` envelope returned by the Storefront API."""

    model_config = ConfigDict(extra="allow")

    data: Any | None = None
    errors: list[GraphQLError] | None = None

    @model_validator(mode="before")
    @classmethod
    def _require_envelope_keys(cls, value: Any) -> Any:
        if isinstance(value, dict) and "data" not in value and "errors" not in value:
            raise ValueError("response has neither 'data' nor 'errors'")
        return value


class CartItem(BaseModel):
    """One requested cart line."""

    model_config = ConfigDict(populate_by_name=True)

    variant_id: str = Field(alias="variantId")  # opaque GID, passed through as-is
    quantity: int = Field(..., ge=0)

    def to_line(self) -> dict:
        """Return the ``CartLineInput`` shape expected by ``cartCreate``."""
        return self.model_dump(by_alias=True)
