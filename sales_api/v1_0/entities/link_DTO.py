from dataclasses import dataclass
from typing import Literal

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

@dataclass(frozen=True, slots=True)
class LinkDTO:
    """Hypermedia affordance advertising a valid next action."""
    href: str
    relation: str
    method: HttpMethod
