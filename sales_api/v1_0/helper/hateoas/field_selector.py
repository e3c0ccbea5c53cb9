"""
Client-driven field projection.

A field specification is the ``fields`` query value, e.g. ``"Name, email"``.
It is parsed once per request into a :class:`FieldSelection` and applied to
records through an explicit, ordered table of field accessors.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Mapping, Optional, Tuple, TypeVar

RecordT = TypeVar("RecordT")


@dataclass(frozen=True, slots=True)
class FieldSelection:
    """Normalized field names in request order; empty means every field."""
    names: Tuple[str, ...] = ()
    raw: Optional[str] = None

    @property
    def is_all(self) -> bool:
        return not self.names


ALL = FieldSelection()


def parse_fields(spec: Optional[str]) -> FieldSelection:
    if spec is None:
        return ALL
    names: list[str] = []
    for token in spec.split(","):
        name = token.strip().lower()
        if name and name not in names:
            names.append(name)
    if not names:
        return ALL
    return FieldSelection(names=tuple(names), raw=spec)


class FieldSelector(Generic[RecordT]):
    def __init__(
        self,
        accessors: Mapping[str, Callable[[RecordT], Any]],
        identity: str = "id",
    ) -> None:
        if identity not in accessors:
            raise ValueError(f"identity field {identity!r} has no accessor")
        self.accessors = dict(accessors)
        self.identity = identity
        self._by_lower = {name.lower(): name for name in self.accessors}

    parse = staticmethod(parse_fields)

    def project(self, record: RecordT, selection: FieldSelection) -> Dict[str, Any]:
        if selection.is_all:
            return {name: get(record) for name, get in self.accessors.items()}

        out: Dict[str, Any] = {}
        for requested in selection.names:
            name = self._by_lower.get(requested)
            if name is None:
                continue
            out[name] = self.accessors[name](record)

        if self.identity not in out:
            out = {self.identity: self.accessors[self.identity](record), **out}
        return out
