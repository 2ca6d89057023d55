"""
Fake Adobe Commerce REST API for testing.

This module provides:
- Sample data matching the real Adobe Commerce REST API format
- A responses-based mock server for unit tests
- Helpers to build clients pointed at the fake server
"""

import json
import re
from typing import Any
from urllib.parse import unquote, urlsplit

import responses

from adobe_commerce_mcp.auth import ImsConfig, OAuth1aConfig
from adobe_commerce_mcp.client import AdobeCommerceClient, ClientOptions
from adobe_commerce_mcp.types import (
    AttributeSetData,
    CategoryData,
    CustomerData,
    OrderData,
    ProductAttributeData,
    ProductData,
    SourceData,
    SourceItemData,
    StockData,
    StockSourceLinkData,
    StoreViewData,
    WebsiteData,
)

REST_URL = "https://commerce.test/rest/"
BASE_URL = f"{REST_URL}V1"
IMS_TOKEN_URL = "https://ims-na1.adobelogin.com/ims/token/v3"

# =============================================================================
# Sample Data - Matches Real Adobe Commerce API Format
# =============================================================================

SAMPLE_PRODUCTS: list[ProductData] = [
    {
        "id": 1,
        "sku": "MB-01",
        "name": "Joust Duffle Bag",
        "attribute_set_id": 4,
        "price": 34,
        "status": 1,
        "visibility": 4,
        "type_id": "simple",
        "weight": 1.2,
        "extension_attributes": {
            "website_ids": [1],
            "category_links": [{"position": 0, "category_id": "4"}],
        },
        "custom_attributes": [
            {"attribute_code": "color", "value": "49"},
            {"attribute_code": "url_key", "value": "joust-duffle-bag"},
        ],
    },
    {
        "id": 2,
        "sku": "MB-02",
        "name": "Strive Shoulder Pack",
        "attribute_set_id": 4,
        "price": 32,
        "status": 1,
        "visibility": 4,
        "type_id": "simple",
        "weight": 0.9,
        "extension_attributes": {"website_ids": [1]},
        "custom_attributes": [{"attribute_code": "color", "value": None}],
    },
    {
        "id": 3,
        "sku": "MH01",
        "name": "Chaz Kangeroo Hoodie",
        "attribute_set_id": 9,
        "price": 52,
        "status": 1,
        "visibility": 4,
        "type_id": "configurable",
        "extension_attributes": {"website_ids": [1]},
        "custom_attributes": [],
    },
]

SAMPLE_CATEGORIES: list[CategoryData] = [
    {
        "id": 2,
        "parent_id": 1,
        "name": "Default Category",
        "is_active": True,
        "position": 1,
        "level": 1,
        "path": "1/2",
        "include_in_menu": True,
    },
    {
        "id": 4,
        "parent_id": 2,
        "name": "Bags",
        "is_active": True,
        "position": 1,
        "level": 2,
        "path": "1/2/4",
        "include_in_menu": True,
    },
]

SAMPLE_CATEGORY_TREE: dict[str, Any] = {
    "id": 2,
    "parent_id": 1,
    "name": "Default Category",
    "is_active": True,
    "level": 1,
    "product_count": 3,
    "children_data": [
        {"id": 4, "parent_id": 2, "name": "Bags", "level": 2, "children_data": []}
    ],
}

SAMPLE_CATEGORY_PRODUCTS = [
    {"sku": "MB-01", "position": 0, "category_id": "4"},
    {"sku": "MB-02", "position": 1, "category_id": "4"},
]

SAMPLE_CUSTOMERS: list[CustomerData] = [
    {
        "id": 1,
        "group_id": 1,
        "email": "roni_cost@example.com",
        "firstname": "Veronica",
        "lastname": "Costello",
        "store_id": 1,
        "website_id": 1,
        "created_at": "2024-01-10 10:00:00",
    }
]

SAMPLE_ORDERS: list[OrderData] = [
    {
        "entity_id": 1,
        "increment_id": "000000001",
        "state": "processing",
        "status": "processing",
        "customer_email": "roni_cost@example.com",
        "grand_total": 39,
        "created_at": "2024-02-01 12:00:00",
        "items": [{"sku": "MB-01", "qty_ordered": 1, "price": 34}],
    }
]

SAMPLE_CMS_BLOCKS = [
    {"id": 1, "identifier": "footer-links", "title": "Footer Links", "content": "<ul></ul>", "active": True}
]

SAMPLE_CMS_PAGES = [
    {"id": 1, "identifier": "home", "title": "Home Page", "page_layout": "1column", "active": True}
]

SAMPLE_ATTRIBUTES: list[ProductAttributeData] = [
    {
        "attribute_id": 93,
        "attribute_code": "color",
        "frontend_input": "select",
        "default_frontend_label": "Color",
        "scope": "global",
        "is_required": False,
        "options": [
            {"label": " ", "value": ""},
            {"label": "Red", "value": "49"},
            {"label": "Blue", "value": "50"},
        ],
    },
    {
        "attribute_id": 144,
        "attribute_code": "size",
        "frontend_input": "select",
        "default_frontend_label": "Size",
        "scope": "global",
        "is_required": False,
        "options": [{"label": "M", "value": "168"}],
    },
]

SAMPLE_ATTRIBUTE_SETS: list[AttributeSetData] = [
    {"attribute_set_id": 4, "attribute_set_name": "Default", "sort_order": 1, "entity_type_id": 4},
    {"attribute_set_id": 9, "attribute_set_name": "Top", "sort_order": 0, "entity_type_id": 4},
]

SAMPLE_ATTRIBUTE_GROUPS = [
    {"attribute_group_id": "7", "attribute_group_name": "Product Details", "attribute_set_id": 4},
    {"attribute_group_id": "8", "attribute_group_name": "Content", "attribute_set_id": 4},
]

SAMPLE_CONFIGURABLE_OPTIONS = [
    {
        "id": 11,
        "attribute_id": "93",
        "label": "Color",
        "position": 0,
        "values": [{"value_index": 49}, {"value_index": 50}],
        "product_id": 3,
    }
]

SAMPLE_WEBSITES: list[WebsiteData] = [
    {"id": 0, "code": "admin", "name": "Admin", "default_group_id": 0},
    {"id": 1, "code": "base", "name": "Main Website", "default_group_id": 1},
]

SAMPLE_STORE_GROUPS = [
    {"id": 1, "website_id": 1, "root_category_id": 2, "default_store_id": 1, "name": "Main Website Store", "code": "main_website_store"}
]

SAMPLE_STORE_VIEWS: list[StoreViewData] = [
    {"id": 1, "code": "default", "name": "Default Store View", "website_id": 1, "store_group_id": 1, "is_active": 1},
    {"id": 2, "code": "en", "name": "English", "website_id": 1, "store_group_id": 1, "is_active": 1},
]

SAMPLE_STORE_CONFIGS = [
    {"id": 1, "code": "default", "website_id": 1, "locale": "en_US", "base_currency_code": "USD", "timezone": "America/Chicago"},
    {"id": 2, "code": "en", "website_id": 1, "locale": "en_GB", "base_currency_code": "USD", "timezone": "Europe/London"},
]

SAMPLE_STOCKS: list[StockData] = [
    {
        "stock_id": 1,
        "name": "Default Stock",
        "extension_attributes": {"sales_channels": [{"type": "website", "code": "base"}]},
    }
]

SAMPLE_SOURCES: list[SourceData] = [
    {"source_code": "default", "name": "Default Source", "enabled": True, "country_id": "US", "postcode": "00000"},
    {"source_code": "warehouse_nl", "name": "Amsterdam Warehouse", "enabled": True, "country_id": "NL", "postcode": "1011"},
]

SAMPLE_SOURCE_ITEMS: list[SourceItemData] = [
    {"sku": "MB-01", "source_code": "default", "quantity": 100, "status": 1},
    {"sku": "MB-02", "source_code": "default", "quantity": 0, "status": 0},
]

SAMPLE_STOCK_SOURCE_LINKS: list[StockSourceLinkData] = [
    {"stock_id": 1, "source_code": "default", "priority": 1}
]

SAMPLE_SOURCE_SELECTION_ALGORITHMS = [
    {"code": "priority", "title": "Source Priority", "description": "Algorithm which provides Source Selections based on predefined priority of Source"},
    {"code": "distance", "title": "Distance Priority", "description": "Algorithm which provides Source Selections based on shipping address"},
]

SAMPLE_STOCK_ITEM = {
    "item_id": 1,
    "product_id": 1,
    "stock_id": 1,
    "qty": 100,
    "is_in_stock": True,
    "manage_stock": True,
    "min_qty": 0,
    "notify_stock_qty": 1,
}


# =============================================================================
# Helpers
# =============================================================================


def search_result(items: list[Any]) -> dict[str, Any]:
    """Build a search result body as returned by Adobe Commerce list endpoints."""
    return {"items": items, "search_criteria": {}, "total_count": len(items)}


def not_found(message: str) -> tuple[int, dict[str, str], str]:
    return (404, {}, json.dumps({"message": message}))


def ok(body: Any) -> tuple[int, dict[str, str], str]:
    return (200, {}, json.dumps(body))


def path_of(request: Any) -> str:
    return unquote(urlsplit(request.url).path)


def body_of(request: Any) -> Any:
    return json.loads(request.body) if request.body else None


def url_pattern(path: str) -> re.Pattern[str]:
    """Regex matching BASE_URL + path with an optional query string."""
    return re.compile(re.escape(BASE_URL) + path + r"(\?.*)?$")


# A product SKU segment; excludes the sibling collections under /products
PRODUCT_SKU = r"/products/(?!attributes\b|attribute-sets\b|tier-prices\b|base-prices\b|cost\b|special-price\b)([^/?]+)"


def oauth_options(url: str = REST_URL, version: str = "V1") -> ClientOptions:
    return ClientOptions(
        url=url,
        auth=OAuth1aConfig(
            consumer_key="ck",
            consumer_secret="cs",
            access_token="at",
            access_token_secret="ats",
        ),
        version=version,
    )


def ims_options(url: str = REST_URL) -> ClientOptions:
    return ClientOptions(url=url, auth=ImsConfig(client_id="client", client_secret="secret"))


def make_client(options: ClientOptions | None = None, **kwargs: Any) -> AdobeCommerceClient:
    return AdobeCommerceClient(options or oauth_options(), **kwargs)


# =============================================================================
# Mock Server Setup
# =============================================================================


class FakeAdobeCommerceAPI:
    """
    A fake Adobe Commerce REST API using the responses library.

    Usage:
        with FakeAdobeCommerceAPI() as fake_api:
            result = get_products(make_client())

    Every request is recorded on fake_api.calls.
    """

    def __init__(self, products: list[dict[str, Any]] | None = None):
        self._products = [dict(p) for p in (products if products is not None else SAMPLE_PRODUCTS)]
        self._mock = responses.RequestsMock(assert_all_requests_are_fired=False)

    def __enter__(self) -> "FakeAdobeCommerceAPI":
        self._mock.start()
        self._setup_endpoints()
        return self

    def __exit__(self, *args: Any) -> None:
        self._mock.stop()
        self._mock.reset()

    @property
    def calls(self):
        return self._mock.calls

    def last_request(self):
        return self._mock.calls[-1].request

    def add(self, method: str, url: str | re.Pattern[str], **kwargs: Any) -> None:
        """Register an extra response; registered before defaults take precedence is not guaranteed."""
        self._mock.add(method, url, **kwargs)

    def replace(self, method: str, url: str | re.Pattern[str], **kwargs: Any) -> None:
        """Replace a default endpoint with a different response."""
        self._mock.replace(method, url, **kwargs)

    def _get(self, path: str, body: Any) -> None:
        self._mock.add(responses.GET, f"{BASE_URL}{path}", json=body, status=200)

    def _callback(self, method: str, url: str | re.Pattern[str], callback) -> None:
        self._mock.add_callback(method, url, callback=callback, content_type="application/json")

    def _echo(self, request: Any) -> tuple[int, dict[str, str], str]:
        body = body_of(request) or {}
        entity = next(iter(body.values()), body) if len(body) == 1 else body
        return ok(entity)

    def _true(self, request: Any) -> tuple[int, dict[str, str], str]:
        return ok(True)

    def _setup_endpoints(self) -> None:
        """Set up all mock endpoints."""
        # Products
        self._get("/products", search_result(self._products))
        self._callback(responses.POST, f"{BASE_URL}/products", self._handle_product_create)
        self._callback(responses.GET, url_pattern(PRODUCT_SKU), self._handle_product_get)
        self._callback(responses.PUT, url_pattern(PRODUCT_SKU), self._handle_product_update)
        self._callback(responses.DELETE, url_pattern(PRODUCT_SKU), self._handle_product_delete)
        self._callback(responses.POST, url_pattern(r"/products/([^/?]+)/websites"), self._true)
        self._callback(responses.DELETE, url_pattern(r"/products/([^/?]+)/websites/\d+"), self._true)

        # Product attributes
        self._get("/products/attributes", search_result(SAMPLE_ATTRIBUTES))
        self._callback(responses.POST, f"{BASE_URL}/products/attributes", self._echo)
        self._callback(
            responses.GET, url_pattern(r"/products/attributes/([^/?]+)"), self._handle_attribute_get
        )
        self._callback(responses.PUT, url_pattern(r"/products/attributes/([^/?]+)"), self._echo)
        self._callback(responses.DELETE, url_pattern(r"/products/attributes/([^/?]+)"), self._true)
        self._callback(
            responses.GET,
            url_pattern(r"/products/attributes/([^/?]+)/options"),
            self._handle_attribute_options,
        )
        self._mock.add(
            responses.POST,
            url_pattern(r"/products/attributes/([^/?]+)/options"),
            json="id_201",
            status=200,
        )
        self._callback(
            responses.PUT, url_pattern(r"/products/attributes/([^/?]+)/options/[^/?]+"), self._true
        )
        self._callback(
            responses.DELETE, url_pattern(r"/products/attributes/([^/?]+)/options/[^/?]+"), self._true
        )

        # Attribute sets
        self._get("/products/attribute-sets/sets/list", search_result(SAMPLE_ATTRIBUTE_SETS))
        self._callback(responses.POST, f"{BASE_URL}/products/attribute-sets", self._handle_set_create)
        self._callback(
            responses.GET, url_pattern(r"/products/attribute-sets/(\d+)"), self._handle_set_get
        )
        self._callback(responses.PUT, url_pattern(r"/products/attribute-sets/(\d+)"), self._echo)
        self._callback(responses.DELETE, url_pattern(r"/products/attribute-sets/(\d+)"), self._true)
        self._get("/products/attribute-sets/4/attributes", SAMPLE_ATTRIBUTES)
        self._callback(
            responses.DELETE, url_pattern(r"/products/attribute-sets/\d+/attributes/[^/?]+"), self._true
        )
        self._mock.add(
            responses.POST, f"{BASE_URL}/products/attribute-sets/attributes", json=501, status=200
        )
        self._get("/products/attribute-sets/groups/list", search_result(SAMPLE_ATTRIBUTE_GROUPS))
        self._callback(responses.POST, f"{BASE_URL}/products/attribute-sets/groups", self._echo)
        self._callback(responses.PUT, url_pattern(r"/products/attribute-sets/\d+/groups"), self._echo)
        self._callback(
            responses.DELETE, url_pattern(r"/products/attribute-sets/groups/\d+"), self._true
        )

        # Configurable products
        self._mock.add(
            responses.POST, url_pattern(r"/configurable-products/[^/?]+/options"), json=11, status=200
        )
        self._get("/configurable-products/MH01/options/all", SAMPLE_CONFIGURABLE_OPTIONS)
        self._callback(
            responses.GET,
            url_pattern(r"/configurable-products/[^/?]+/options/(\d+)"),
            self._handle_configurable_option_get,
        )
        self._mock.add(
            responses.PUT, url_pattern(r"/configurable-products/[^/?]+/options/\d+"), json=11, status=200
        )
        self._callback(
            responses.DELETE, url_pattern(r"/configurable-products/[^/?]+/options/\d+"), self._true
        )
        self._callback(responses.POST, url_pattern(r"/configurable-products/[^/?]+/child"), self._true)
        self._callback(
            responses.DELETE, url_pattern(r"/configurable-products/[^/?]+/children/[^/?]+"), self._true
        )
        self._get("/configurable-products/MH01/children", self._products[:2])

        # Pricing
        for path in (
            "/products/base-prices",
            "/products/special-price",
            "/products/special-price-delete",
            "/products/tier-prices",
            "/products/tier-prices-delete",
            "/products/cost",
        ):
            self._mock.add(responses.POST, f"{BASE_URL}{path}", json=[], status=200)
        self._mock.add(responses.PUT, f"{BASE_URL}/products/tier-prices", json=[], status=200)
        self._callback(
            responses.POST, f"{BASE_URL}/products/base-prices-information", self._handle_price_info
        )
        self._callback(
            responses.POST, f"{BASE_URL}/products/special-price-information", self._handle_price_info
        )
        self._callback(
            responses.POST, f"{BASE_URL}/products/tier-prices-information", self._handle_price_info
        )
        self._callback(responses.POST, f"{BASE_URL}/products/cost-information", self._handle_cost_info)
        self._mock.add(responses.POST, f"{BASE_URL}/products/cost-delete", json=True, status=200)

        # Categories
        self._get("/categories/list", search_result(SAMPLE_CATEGORIES))
        self._get("/categories", SAMPLE_CATEGORY_TREE)
        self._callback(responses.POST, f"{BASE_URL}/categories", self._handle_category_create)
        self._callback(responses.GET, url_pattern(r"/categories/(\d+)"), self._handle_category_get)
        self._callback(responses.PUT, url_pattern(r"/categories/(\d+)"), self._echo)
        self._callback(responses.DELETE, url_pattern(r"/categories/(\d+)"), self._true)
        self._callback(responses.PUT, url_pattern(r"/categories/(\d+)/move"), self._true)
        self._get("/categories/4/products", SAMPLE_CATEGORY_PRODUCTS)
        self._callback(responses.POST, url_pattern(r"/categories/(\d+)/products"), self._true)
        self._callback(responses.DELETE, url_pattern(r"/categories/(\d+)/products/[^/?]+"), self._true)

        # Customers, orders, CMS
        self._get("/customers/search", search_result(SAMPLE_CUSTOMERS))
        self._get("/orders", search_result(SAMPLE_ORDERS))
        self._get("/cmsBlock/search", search_result(SAMPLE_CMS_BLOCKS))
        self._get("/cmsPage/search", search_result(SAMPLE_CMS_PAGES))

        # Stores
        self._callback(responses.GET, f"{BASE_URL}/store/storeConfigs", self._handle_store_configs)
        self._get("/store/storeViews", SAMPLE_STORE_VIEWS)
        self._get("/store/storeGroups", SAMPLE_STORE_GROUPS)
        self._get("/store/websites", SAMPLE_WEBSITES)

        # Inventory: stocks
        self._get("/inventory/stocks", search_result(SAMPLE_STOCKS))
        self._mock.add(responses.POST, f"{BASE_URL}/inventory/stocks", json=2, status=200)
        self._callback(responses.GET, url_pattern(r"/inventory/stocks/(\d+)"), self._handle_stock_get)
        self._mock.add(responses.PUT, url_pattern(r"/inventory/stocks/(\d+)"), json=1, status=200)
        self._mock.add(responses.DELETE, url_pattern(r"/inventory/stocks/(\d+)"), body="", status=200)
        self._get("/inventory/stock-resolver/website/base", SAMPLE_STOCKS[0])

        # Inventory: sources
        self._get("/inventory/sources", search_result(SAMPLE_SOURCES))
        self._mock.add(responses.POST, f"{BASE_URL}/inventory/sources", body="", status=200)
        self._callback(responses.GET, url_pattern(r"/inventory/sources/([^/?]+)"), self._handle_source_get)
        self._mock.add(responses.PUT, url_pattern(r"/inventory/sources/([^/?]+)"), body="", status=200)

        # Inventory: source items and links
        self._get("/inventory/source-items", search_result(SAMPLE_SOURCE_ITEMS))
        self._mock.add(responses.POST, f"{BASE_URL}/inventory/source-items", body="", status=200)
        self._mock.add(responses.POST, f"{BASE_URL}/inventory/source-items-delete", body="", status=200)
        self._get("/inventory/stock-source-links", search_result(SAMPLE_STOCK_SOURCE_LINKS))
        self._mock.add(responses.POST, f"{BASE_URL}/inventory/stock-source-links", body="", status=200)
        self._mock.add(
            responses.POST, f"{BASE_URL}/inventory/stock-source-links-delete", body="", status=200
        )

        # Inventory: source selection
        self._get("/inventory/source-selection-algorithm-list", SAMPLE_SOURCE_SELECTION_ALGORITHMS)
        self._callback(
            responses.POST,
            f"{BASE_URL}/inventory/source-selection-algorithm-result",
            self._handle_source_selection,
        )

        # Inventory: salability
        self._get(
            "/inventory/are-products-salable",
            [{"sku": "MB-01", "stock_id": 1, "is_salable": True}],
        )
        self._get(
            "/inventory/are-product-salable-for-requested-qty/",
            [{"sku": "MB-01", "stock_id": 1, "salable": {"is_salable": True, "errors": []}}],
        )
        self._mock.add(
            responses.GET, url_pattern(r"/inventory/is-product-salable/[^/?]+/\d+"), json=True
        )
        self._mock.add(
            responses.GET,
            url_pattern(r"/inventory/is-product-salable-for-requested-qty/[^/?]+/\d+/[^/?]+"),
            json={"is_salable": True, "errors": []},
        )
        self._mock.add(
            responses.GET,
            url_pattern(r"/inventory/get-product-salable-quantity/[^/?]+/\d+"),
            json=100,
        )

        # Single-source stock items
        self._get("/stockItems/lowStock/", {"items": [SAMPLE_STOCK_ITEM], "total_count": 1})
        self._callback(responses.GET, url_pattern(r"/stockItems/([^/?]+)"), self._handle_stock_item_get)
        self._mock.add(
            responses.PUT, url_pattern(r"/products/[^/?]+/stockItems/\d+"), json=1, status=200
        )
        self._callback(
            responses.GET, url_pattern(r"/stockStatuses/([^/?]+)"), self._handle_stock_status_get
        )

    # -------------------------------------------------------------------------
    # Callbacks
    # -------------------------------------------------------------------------

    def _find_product(self, sku: str) -> dict[str, Any] | None:
        return next((p for p in self._products if p["sku"] == sku), None)

    def _product_not_found(self) -> tuple[int, dict[str, str], str]:
        return not_found(
            "The product that was requested doesn't exist. Verify the product and try again."
        )

    def _handle_product_get(self, request: Any) -> tuple[int, dict[str, str], str]:
        sku = path_of(request).rsplit("/", 1)[-1]
        product = self._find_product(sku)
        return ok(product) if product else self._product_not_found()

    def _handle_product_create(self, request: Any) -> tuple[int, dict[str, str], str]:
        product = body_of(request)["product"]
        if self._find_product(product.get("sku", "")):
            return (400, {}, json.dumps({"message": "The value specified in the URL Key field would generate a URL that already exists."}))
        created = {"id": max(p["id"] for p in self._products) + 1 if self._products else 1, **product}
        self._products.append(created)
        return ok(created)

    def _handle_product_update(self, request: Any) -> tuple[int, dict[str, str], str]:
        sku = path_of(request).rsplit("/", 1)[-1]
        product = self._find_product(sku)
        if not product:
            return self._product_not_found()
        product.update(body_of(request)["product"])
        return ok(product)

    def _handle_product_delete(self, request: Any) -> tuple[int, dict[str, str], str]:
        sku = path_of(request).rsplit("/", 1)[-1]
        product = self._find_product(sku)
        if not product:
            return self._product_not_found()
        self._products.remove(product)
        return ok(True)

    def _handle_attribute_get(self, request: Any) -> tuple[int, dict[str, str], str]:
        code = path_of(request).rsplit("/", 1)[-1]
        attribute = next((a for a in SAMPLE_ATTRIBUTES if a["attribute_code"] == code), None)
        return ok(attribute) if attribute else not_found(
            "The attribute with a \"%1\" attributeCode doesn't exist. Verify the attribute and try again."
        )

    def _handle_attribute_options(self, request: Any) -> tuple[int, dict[str, str], str]:
        code = path_of(request).split("/")[-2]
        attribute = next((a for a in SAMPLE_ATTRIBUTES if a["attribute_code"] == code), None)
        return ok(attribute["options"]) if attribute else not_found("Attribute not found")

    def _handle_set_create(self, request: Any) -> tuple[int, dict[str, str], str]:
        body = body_of(request)
        return ok({"attribute_set_id": 20, **body["attributeSet"]})

    def _handle_set_get(self, request: Any) -> tuple[int, dict[str, str], str]:
        set_id = int(path_of(request).rsplit("/", 1)[-1])
        found = next((s for s in SAMPLE_ATTRIBUTE_SETS if s["attribute_set_id"] == set_id), None)
        return ok(found) if found else not_found("No such entity with id = %1")

    def _handle_configurable_option_get(self, request: Any) -> tuple[int, dict[str, str], str]:
        option_id = int(path_of(request).rsplit("/", 1)[-1])
        found = next((o for o in SAMPLE_CONFIGURABLE_OPTIONS if o["id"] == option_id), None)
        return ok(found) if found else not_found("Requested option doesn't exist: %1")

    def _handle_price_info(self, request: Any) -> tuple[int, dict[str, str], str]:
        skus = body_of(request)["skus"]
        return ok(
            [
                {"sku": p["sku"], "price": p["price"], "store_id": 0}
                for p in self._products
                if p["sku"] in skus
            ]
        )

    def _handle_cost_info(self, request: Any) -> tuple[int, dict[str, str], str]:
        skus = body_of(request)["skus"]
        return ok([{"sku": sku, "cost": 10, "store_id": 0} for sku in skus])

    def _handle_category_get(self, request: Any) -> tuple[int, dict[str, str], str]:
        category_id = int(path_of(request).rsplit("/", 1)[-1])
        found = next((c for c in SAMPLE_CATEGORIES if c["id"] == category_id), None)
        return ok(found) if found else not_found('No such entity with id = %1')

    def _handle_category_create(self, request: Any) -> tuple[int, dict[str, str], str]:
        return ok({"id": 42, **body_of(request)["category"]})

    def _handle_store_configs(self, request: Any) -> tuple[int, dict[str, str], str]:
        codes = re.findall(r"storeCodes(?:\[\]|%5B%5D)=([^&]+)", request.url)
        configs = [c for c in SAMPLE_STORE_CONFIGS if not codes or c["code"] in codes]
        return ok(configs)

    def _handle_stock_get(self, request: Any) -> tuple[int, dict[str, str], str]:
        stock_id = int(path_of(request).rsplit("/", 1)[-1])
        found = next((s for s in SAMPLE_STOCKS if s["stock_id"] == stock_id), None)
        return ok(found) if found else not_found('Stock with id "%value" does not exist.')

    def _handle_source_get(self, request: Any) -> tuple[int, dict[str, str], str]:
        code = path_of(request).rsplit("/", 1)[-1]
        found = next((s for s in SAMPLE_SOURCES if s["source_code"] == code), None)
        return ok(found) if found else not_found('Source with code "%value" does not exist.')

    def _handle_source_selection(self, request: Any) -> tuple[int, dict[str, str], str]:
        inventory_request = body_of(request)["inventoryRequest"]
        items = [
            {"source_code": "default", "sku": item["sku"], "qty_to_deduct": item["qty"], "qty_available": 100}
            for item in inventory_request["items"]
        ]
        return ok({"source_selection_items": items, "shippable": True})

    def _handle_stock_item_get(self, request: Any) -> tuple[int, dict[str, str], str]:
        sku = path_of(request).rsplit("/", 1)[-1]
        if not self._find_product(sku):
            return self._product_not_found()
        return ok(SAMPLE_STOCK_ITEM)

    def _handle_stock_status_get(self, request: Any) -> tuple[int, dict[str, str], str]:
        sku = path_of(request).rsplit("/", 1)[-1]
        product = self._find_product(sku)
        if not product:
            return self._product_not_found()
        return ok({"product_id": product["id"], "stock_id": 1, "qty": 100, "stock_status": 1})
