"""
Pricing tools.

Registers set/get/delete tools for base prices, special prices, tier prices
and costs. The set and delete tools report per-item failures returned by
Adobe Commerce; an empty list means every price was accepted.
"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from adobe_commerce_mcp.api import pricing
from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.tools.response import item_text_response
from adobe_commerce_mcp.tools.schemas import (
    BasePriceInput,
    CostInput,
    Sku,
    SpecialPriceInput,
    TierPriceInput,
)

Skus = Annotated[list[Sku], Field(min_length=1, description="Product SKUs.")]


def dump_all(models: list[BaseModel] | list[dict], model_type: type[BaseModel]) -> list[dict]:
    """Validate and dump a list of price inputs given as models or dicts."""
    return [model_type.model_validate(m).model_dump() for m in models]


def register_pricing_tools(mcp: FastMCP, client: AdobeCommerceClient) -> None:
    """Register pricing tools on the server."""

    @mcp.tool(name="set-base-prices", title="Set Base Prices", annotations={"readOnlyHint": False})
    def set_base_prices(prices: Annotated[list[BasePriceInput], Field(min_length=1)]) -> str:
        """Set base prices for one or more products."""
        return item_text_response(
            "Set Base Prices",
            pricing.set_base_prices(client, dump_all(prices, BasePriceInput)),
        )

    @mcp.tool(name="get-base-prices", title="Get Base Prices", annotations={"readOnlyHint": True})
    def get_base_prices(skus: Skus) -> str:
        """Get base prices for one or more products."""
        return item_text_response("Base Prices", pricing.get_base_prices(client, skus))

    @mcp.tool(
        name="set-special-prices", title="Set Special Prices", annotations={"readOnlyHint": False}
    )
    def set_special_prices(
        prices: Annotated[list[SpecialPriceInput], Field(min_length=1)],
    ) -> str:
        """Set time-limited special prices for one or more products."""
        return item_text_response(
            "Set Special Prices",
            pricing.set_special_prices(client, dump_all(prices, SpecialPriceInput)),
        )

    @mcp.tool(
        name="get-special-prices", title="Get Special Prices", annotations={"readOnlyHint": True}
    )
    def get_special_prices(skus: Skus) -> str:
        """Get special prices for one or more products."""
        return item_text_response("Special Prices", pricing.get_special_prices(client, skus))

    @mcp.tool(
        name="delete-special-prices",
        title="Delete Special Prices",
        annotations={"readOnlyHint": False},
    )
    def delete_special_prices(
        prices: Annotated[list[SpecialPriceInput], Field(min_length=1)],
    ) -> str:
        """Delete special prices. Each entry must match an existing special price."""
        return item_text_response(
            "Delete Special Prices",
            pricing.delete_special_prices(client, dump_all(prices, SpecialPriceInput)),
        )

    @mcp.tool(name="set-tier-prices", title="Set Tier Prices", annotations={"readOnlyHint": False})
    def set_tier_prices(prices: Annotated[list[TierPriceInput], Field(min_length=1)]) -> str:
        """Add tier prices for one or more products."""
        return item_text_response(
            "Set Tier Prices",
            pricing.set_tier_prices(client, dump_all(prices, TierPriceInput)),
        )

    @mcp.tool(
        name="replace-tier-prices",
        title="Replace Tier Prices",
        annotations={"readOnlyHint": False},
    )
    def replace_tier_prices(prices: Annotated[list[TierPriceInput], Field(min_length=1)]) -> str:
        """Replace all existing tier prices of the given products."""
        return item_text_response(
            "Replace Tier Prices",
            pricing.replace_tier_prices(client, dump_all(prices, TierPriceInput)),
        )

    @mcp.tool(name="get-tier-prices", title="Get Tier Prices", annotations={"readOnlyHint": True})
    def get_tier_prices(skus: Skus) -> str:
        """Get tier prices for one or more products."""
        return item_text_response("Tier Prices", pricing.get_tier_prices(client, skus))

    @mcp.tool(
        name="delete-tier-prices", title="Delete Tier Prices", annotations={"readOnlyHint": False}
    )
    def delete_tier_prices(prices: Annotated[list[TierPriceInput], Field(min_length=1)]) -> str:
        """Delete tier prices. Each entry must match an existing tier price."""
        return item_text_response(
            "Delete Tier Prices",
            pricing.delete_tier_prices(client, dump_all(prices, TierPriceInput)),
        )

    @mcp.tool(name="set-costs", title="Set Costs", annotations={"readOnlyHint": False})
    def set_costs(prices: Annotated[list[CostInput], Field(min_length=1)]) -> str:
        """Set product costs."""
        return item_text_response(
            "Set Costs", pricing.set_costs(client, dump_all(prices, CostInput))
        )

    @mcp.tool(name="get-costs", title="Get Costs", annotations={"readOnlyHint": True})
    def get_costs(skus: Skus) -> str:
        """Get product costs."""
        return item_text_response("Costs", pricing.get_costs(client, skus))

    @mcp.tool(name="delete-costs", title="Delete Costs", annotations={"readOnlyHint": False})
    def delete_costs(skus: Skus) -> str:
        """Delete the costs of the given products."""
        return item_text_response("Delete Costs", pricing.delete_costs(client, skus))
