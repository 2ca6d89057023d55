"""
Pricing API module.

Provides resource functions for the bulk price endpoints. All of them are
POST (or PUT) calls whose body carries either a list of prices or a list of
SKUs:
- /products/base-prices, /products/base-prices-information
- /products/special-price, /products/special-price-information,
  /products/special-price-delete
- /products/tier-prices (POST add, PUT replace), /products/tier-prices-information,
  /products/tier-prices-delete
- /products/cost, /products/cost-information, /products/cost-delete

The *set* endpoints return a list of per-item failures; an empty list means
every price was accepted.
"""

from typing import Any, Literal

from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.errors import AdobeCommerceError
from adobe_commerce_mcp.types import (
    ApiResponse,
    BasePriceData,
    CostData,
    PriceUpdateResultData,
    SpecialPriceData,
    TierPriceData,
    api_error_response,
    api_success_response,
)


def _call(
    client: AdobeCommerceClient,
    endpoint: str,
    payload: dict[str, Any],
    method: Literal["POST", "PUT"] = "POST",
) -> ApiResponse[Any]:
    try:
        if method == "PUT":
            data = client.put(endpoint, payload)
        else:
            data = client.post(endpoint, payload)
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


# =============================================================================
# Base Prices
# =============================================================================


def set_base_prices(
    client: AdobeCommerceClient, prices: list[BasePriceData]
) -> ApiResponse[list[PriceUpdateResultData]]:
    return _call(client, "/products/base-prices", {"prices": prices})


def get_base_prices(
    client: AdobeCommerceClient, skus: list[str]
) -> ApiResponse[list[BasePriceData]]:
    return _call(client, "/products/base-prices-information", {"skus": skus})


# =============================================================================
# Special Prices
# =============================================================================


def set_special_prices(
    client: AdobeCommerceClient, prices: list[SpecialPriceData]
) -> ApiResponse[list[PriceUpdateResultData]]:
    return _call(client, "/products/special-price", {"prices": prices})


def get_special_prices(
    client: AdobeCommerceClient, skus: list[str]
) -> ApiResponse[list[SpecialPriceData]]:
    return _call(client, "/products/special-price-information", {"skus": skus})


def delete_special_prices(
    client: AdobeCommerceClient, prices: list[SpecialPriceData]
) -> ApiResponse[list[PriceUpdateResultData]]:
    return _call(client, "/products/special-price-delete", {"prices": prices})


# =============================================================================
# Tier Prices
# =============================================================================


def set_tier_prices(
    client: AdobeCommerceClient, prices: list[TierPriceData]
) -> ApiResponse[list[PriceUpdateResultData]]:
    return _call(client, "/products/tier-prices", {"prices": prices})


def replace_tier_prices(
    client: AdobeCommerceClient, prices: list[TierPriceData]
) -> ApiResponse[list[PriceUpdateResultData]]:
    """Replace all tier prices of the given SKUs."""
    return _call(client, "/products/tier-prices", {"prices": prices}, method="PUT")


def get_tier_prices(
    client: AdobeCommerceClient, skus: list[str]
) -> ApiResponse[list[TierPriceData]]:
    return _call(client, "/products/tier-prices-information", {"skus": skus})


def delete_tier_prices(
    client: AdobeCommerceClient, prices: list[TierPriceData]
) -> ApiResponse[list[PriceUpdateResultData]]:
    return _call(client, "/products/tier-prices-delete", {"prices": prices})


# =============================================================================
# Costs
# =============================================================================


def set_costs(
    client: AdobeCommerceClient, prices: list[CostData]
) -> ApiResponse[list[PriceUpdateResultData]]:
    return _call(client, "/products/cost", {"prices": prices})


def get_costs(client: AdobeCommerceClient, skus: list[str]) -> ApiResponse[list[CostData]]:
    return _call(client, "/products/cost-information", {"skus": skus})


def delete_costs(client: AdobeCommerceClient, skus: list[str]) -> ApiResponse[bool]:
    return _call(client, "/products/cost-delete", {"skus": skus})
