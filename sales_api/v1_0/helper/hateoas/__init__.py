from fastapi import Request

from sales_api.v1_0.entities import CUSTOMER_FIELDS
from .field_selector import ALL, FieldSelection, FieldSelector, parse_fields
from .link_catalog import (
    CREATE_CUSTOMER,
    DELETE_CUSTOMER,
    GET_ALL_CUSTOMERS,
    GET_CUSTOMER,
    CustomerLinkCatalog,
)
from .resource_shaper import ResourceShaper
from .url_builder import RequestUrlBuilder, UrlBuilder


def build_customer_shaper(url_builder: UrlBuilder) -> ResourceShaper:
    return ResourceShaper(FieldSelector(CUSTOMER_FIELDS), CustomerLinkCatalog(url_builder))


def get_customer_shaper(request: Request) -> ResourceShaper:
    """FastAPI dependency: one shaper per request, bound to its base URL."""
    return build_customer_shaper(RequestUrlBuilder(request))


__all__ = [
    "ALL", "FieldSelection", "FieldSelector", "parse_fields",
    "CREATE_CUSTOMER", "DELETE_CUSTOMER", "GET_ALL_CUSTOMERS", "GET_CUSTOMER",
    "CustomerLinkCatalog",
    "ResourceShaper",
    "RequestUrlBuilder", "UrlBuilder",
    "build_customer_shaper", "get_customer_shaper",
]
