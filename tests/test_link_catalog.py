"""
Tests for hypermedia link synthesis
"""

from sales_api.v1_0.helper.hateoas import ALL, CustomerLinkCatalog, parse_fields


class TestLinksForResource:
    def test_three_links_in_fixed_order(self, url_builder):
        links = CustomerLinkCatalog(url_builder).links_for_resource(7, ALL)

        assert [(l.relation, l.method) for l in links] == [
            ("self", "GET"),
            ("delete_customer", "DELETE"),
            ("create_customer", "POST"),
        ]

    def test_self_link_without_selection_has_no_fields_param(self, url_builder):
        links = CustomerLinkCatalog(url_builder).links_for_resource(7, ALL)

        assert url_builder.calls[0] == ("get_customer", {"customer_id": 7}, {})
        assert links[0].href == "http://test/get_customer/7"

    def test_self_link_with_selection_carries_fields_param(self, url_builder):
        links = CustomerLinkCatalog(url_builder).links_for_resource(7, parse_fields("name"))

        assert url_builder.calls[0] == ("get_customer", {"customer_id": 7}, {"fields": "name"})
        assert links[0].href == "http://test/get_customer/7?fields=name"

    def test_self_link_forwards_spec_as_supplied(self, url_builder):
        CustomerLinkCatalog(url_builder).links_for_resource(7, parse_fields("Name, EMAIL"))

        assert url_builder.calls[0][2]["fields"] == "Name, EMAIL"

    def test_delete_and_create_ignore_selection(self, url_builder):
        CustomerLinkCatalog(url_builder).links_for_resource(7, parse_fields("name"))

        assert url_builder.calls[1] == ("delete_customer", {"customer_id": 7}, {})
        assert url_builder.calls[2] == ("create_customer", {}, {"customer_id": 7})

    def test_links_follow_identity(self, url_builder):
        catalog = CustomerLinkCatalog(url_builder)
        first = catalog.links_for_resource(1, ALL)
        second = catalog.links_for_resource(2, ALL)

        assert first[0].href.endswith("/1")
        assert second[0].href.endswith("/2")


class TestLinksForCollection:
    def test_single_self_link(self, url_builder):
        links = CustomerLinkCatalog(url_builder).links_for_collection(ALL)

        assert len(links) == 1
        assert (links[0].relation, links[0].method) == ("self", "GET")

    def test_without_selection_passes_empty_fields(self, url_builder):
        links = CustomerLinkCatalog(url_builder).links_for_collection(ALL)

        assert url_builder.calls == [("get_all_customers", {}, {"fields": None})]
        assert links[0].href == "http://test/get_all_customers"

    def test_with_selection_passes_no_fields(self, url_builder):
        links = CustomerLinkCatalog(url_builder).links_for_collection(parse_fields("name"))

        assert url_builder.calls == [("get_all_customers", {}, {})]
        assert links[0].href == "http://test/get_all_customers"
