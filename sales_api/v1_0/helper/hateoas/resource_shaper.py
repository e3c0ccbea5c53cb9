from dataclasses import asdict
from typing import Any, Dict, Iterable, List

from sales_api.v1_0.entities import CustomerDTO, LinkDTO
from .field_selector import FieldSelection, FieldSelector
from .link_catalog import CustomerLinkCatalog


def _serialize_links(links: Iterable[LinkDTO]) -> List[Dict[str, Any]]:
    return [asdict(link) for link in links]


class ResourceShaper:
    """Projection plus hypermedia for customer payloads."""

    def __init__(self, selector: FieldSelector[CustomerDTO], links: CustomerLinkCatalog) -> None:
        self.selector = selector
        self.links = links

    def shape_one(self, record: CustomerDTO, selection: FieldSelection) -> Dict[str, Any]:
        shaped = self.selector.project(record, selection)
        shaped["links"] = _serialize_links(
            self.links.links_for_resource(shaped[self.selector.identity], selection)
        )
        return shaped

    def shape_many(self, records: Iterable[CustomerDTO], selection: FieldSelection) -> Dict[str, Any]:
        return {
            "value": [self.shape_one(r, selection) for r in records],
            "links": _serialize_links(self.links.links_for_collection(selection)),
        }
