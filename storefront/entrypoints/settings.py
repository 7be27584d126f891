from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # STOREFRONT_* names are accepted as well as the SHOPIFY_* ones
    SHOPIFY_STORE_DOMAIN: str = Field(  # e.g. "my-shop.myshopify.com"
        validation_alias=AliasChoices("SHOPIFY_STORE_DOMAIN", "STOREFRONT_SHOP_DOMAIN")
    )
    SHOPIFY_STOREFRONT_TOKEN: SecretStr = Field(
        validation_alias=AliasChoices("SHOPIFY_STOREFRONT_TOKEN", "STOREFRONT_ACCESS_TOKEN")
    )
    SHOPIFY_API_VERSION: str = Field(
        default="2024-01",
        validation_alias=AliasChoices("SHOPIFY_API_VERSION", "STOREFRONT_API_VERSION"),
    )
