from typing import Any, Mapping, Optional, Protocol
from fastapi import Request


class UrlBuilder(Protocol):
    def build_href(
        self,
        route_name: str,
        path_params: Mapping[str, Any],
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> str: ...


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


class RequestUrlBuilder:
    """
    Absolute URLs for named routes of the running app.

    The caller says which params fill the route path and which go to the
    query string. Blank query values are left out.
    """

    def __init__(self, request: Request) -> None:
        self.request = request

    def build_href(
        self,
        route_name: str,
        path_params: Mapping[str, Any],
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        url = self.request.url_for(route_name, **{k: str(v) for k, v in path_params.items()})
        query = {k: v for k, v in (query_params or {}).items() if not _is_blank(v)}
        if query:
            url = url.include_query_params(**query)
        return str(url)
