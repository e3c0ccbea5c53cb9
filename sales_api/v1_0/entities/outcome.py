"""
Terminal results of a customer operation.

Every service method returns exactly one of these; the router maps each case
to a single HTTP response.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


@dataclass(frozen=True, slots=True)
class Ok:
    payload: Any


@dataclass(frozen=True, slots=True)
class Created:
    payload: Dict[str, Any]
    location_id: int


@dataclass(frozen=True, slots=True)
class NoContent:
    pass


@dataclass(frozen=True, slots=True)
class BadRequest:
    pass


@dataclass(frozen=True, slots=True)
class UnprocessableEntity:
    errors: Dict[str, List[str]] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class NotFound:
    pass


@dataclass(frozen=True, slots=True)
class PersistenceFailure:
    message: str


Outcome = Union[Ok, Created, NoContent, BadRequest, UnprocessableEntity, NotFound, PersistenceFailure]
