from typing import Any, Dict, List

from sales_api.v1_0.entities import LinkDTO
from .field_selector import FieldSelection
from .url_builder import UrlBuilder

GET_ALL_CUSTOMERS = "get_all_customers"
GET_CUSTOMER = "get_customer"
CREATE_CUSTOMER = "create_customer"
DELETE_CUSTOMER = "delete_customer"


class CustomerLinkCatalog:
    """Decides which links a customer (or the collection) advertises."""

    def __init__(self, url_builder: UrlBuilder) -> None:
        self.url_builder = url_builder

    def links_for_resource(self, customer_id: int, selection: FieldSelection) -> List[LinkDTO]:
        path = {"customer_id": customer_id}
        self_query: Dict[str, Any] = {}
        if not selection.is_all:
            self_query["fields"] = selection.raw

        return [
            LinkDTO(
                href=self.url_builder.build_href(GET_CUSTOMER, path, self_query),
                relation="self",
                method="GET",
            ),
            LinkDTO(
                href=self.url_builder.build_href(DELETE_CUSTOMER, path),
                relation="delete_customer",
                method="DELETE",
            ),
            # create has no id in its route; the id lands in the query string.
            # Kept because existing clients read this href as published.
            LinkDTO(
                href=self.url_builder.build_href(CREATE_CUSTOMER, {}, {"customer_id": customer_id}),
                relation="create_customer",
                method="POST",
            ),
        ]

    def links_for_collection(self, selection: FieldSelection) -> List[LinkDTO]:
        # Inverted relative to links_for_resource: the empty fields value is forwarded
        # when nothing was selected and dropped when something was.
        if selection.is_all:
            query: Dict[str, Any] = {"fields": selection.raw}
        else:
            query = {}
        return [
            LinkDTO(
                href=self.url_builder.build_href(GET_ALL_CUSTOMERS, {}, query),
                relation="self",
                method="GET",
            )
        ]
