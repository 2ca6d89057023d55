"""
Attribute sets API module.

Provides resource functions for attribute sets and attribute groups:
- POST   /products/attribute-sets                                 - Create a set
- GET    /products/attribute-sets/sets/list                       - Search sets
- GET    /products/attribute-sets/{id}                            - Retrieve a set
- PUT    /products/attribute-sets/{id}                            - Update a set
- DELETE /products/attribute-sets/{id}                            - Delete a set
- GET    /products/attribute-sets/{id}/attributes                 - List set attributes
- DELETE /products/attribute-sets/{id}/attributes/{code}          - Remove an attribute
- POST   /products/attribute-sets/attributes                      - Assign attribute to group
- GET    /products/attribute-sets/groups/list                     - Search groups
- POST   /products/attribute-sets/groups                          - Create a group
- PUT    /products/attribute-sets/{id}/groups                     - Update a group
- DELETE /products/attribute-sets/groups/{groupId}                - Delete a group
"""

from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.errors import AdobeCommerceError
from adobe_commerce_mcp.search_criteria import (
    SearchCriteria,
    build_search_criteria_query,
    encode_component,
)
from adobe_commerce_mcp.types import (
    ApiResponse,
    AttributeGroupData,
    AttributeSetData,
    ProductAttributeData,
    api_error_response,
    api_success_response,
)

# The "Default" attribute set new sets are based on
DEFAULT_ATTRIBUTE_SET_ID = 4


def create_attribute_set(
    client: AdobeCommerceClient,
    attribute_set: AttributeSetData,
    skeleton_id: int = DEFAULT_ATTRIBUTE_SET_ID,
) -> ApiResponse[AttributeSetData]:
    endpoint = "/products/attribute-sets"
    try:
        data = client.post(
            endpoint, {"attributeSet": attribute_set, "skeletonId": skeleton_id}
        )
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_attribute_sets_list(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[AttributeSetData]]:
    endpoint = f"/products/attribute-sets/sets/list?{build_search_criteria_query(options)}"
    try:
        data = client.get(endpoint)
        return api_success_response(endpoint, (data or {}).get("items") or [])
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_attribute_set_by_id(
    client: AdobeCommerceClient, attribute_set_id: int
) -> ApiResponse[AttributeSetData]:
    endpoint = f"/products/attribute-sets/{attribute_set_id}"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def update_attribute_set(
    client: AdobeCommerceClient,
    attribute_set_id: int,
    attribute_set: AttributeSetData,
) -> ApiResponse[AttributeSetData]:
    endpoint = f"/products/attribute-sets/{attribute_set_id}"
    try:
        data = client.put(
            endpoint,
            {"attributeSet": {**attribute_set, "attribute_set_id": attribute_set_id}},
        )
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_attribute_set(
    client: AdobeCommerceClient, attribute_set_id: int
) -> ApiResponse[bool]:
    endpoint = f"/products/attribute-sets/{attribute_set_id}"
    try:
        client.delete(endpoint)
        return api_success_response(endpoint, True)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_attributes_from_set(
    client: AdobeCommerceClient, attribute_set_id: int
) -> ApiResponse[list[ProductAttributeData]]:
    endpoint = f"/products/attribute-sets/{attribute_set_id}/attributes"
    try:
        data = client.get(endpoint)
        return api_success_response(endpoint, data if isinstance(data, list) else [])
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_attribute_from_set(
    client: AdobeCommerceClient, attribute_set_id: int, attribute_code: str
) -> ApiResponse[bool]:
    endpoint = (
        f"/products/attribute-sets/{attribute_set_id}"
        f"/attributes/{encode_component(attribute_code)}"
    )
    try:
        client.delete(endpoint)
        return api_success_response(endpoint, True)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def assign_attribute_to_set_group(
    client: AdobeCommerceClient,
    attribute_set_id: int,
    attribute_group_id: int,
    attribute_code: str,
    sort_order: int = 0,
) -> ApiResponse[bool]:
    endpoint = "/products/attribute-sets/attributes"
    payload = {
        "attributeSetId": attribute_set_id,
        "attributeGroupId": attribute_group_id,
        "attributeCode": attribute_code,
        "sortOrder": sort_order,
    }
    try:
        client.post(endpoint, payload)
        return api_success_response(endpoint, True)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_attribute_groups(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[AttributeGroupData]]:
    endpoint = f"/products/attribute-sets/groups/list?{build_search_criteria_query(options)}"
    try:
        data = client.get(endpoint)
        return api_success_response(endpoint, (data or {}).get("items") or [])
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def create_attribute_group(
    client: AdobeCommerceClient, group: AttributeGroupData
) -> ApiResponse[AttributeGroupData]:
    endpoint = "/products/attribute-sets/groups"
    try:
        data = client.post(endpoint, {"group": group})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def update_attribute_group(
    client: AdobeCommerceClient, attribute_set_id: int, group: AttributeGroupData
) -> ApiResponse[AttributeGroupData]:
    endpoint = f"/products/attribute-sets/{attribute_set_id}/groups"
    try:
        data = client.put(endpoint, {"group": group})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_attribute_group(
    client: AdobeCommerceClient, attribute_group_id: int
) -> ApiResponse[bool]:
    endpoint = f"/products/attribute-sets/groups/{attribute_group_id}"
    try:
        client.delete(endpoint)
        return api_success_response(endpoint, True)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)
