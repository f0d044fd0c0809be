"""
Shared fixtures. Network access goes through httpx MockTransport.
"""

from typing import Callable, Dict, List, Union

import httpx
import pytest

Route = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that serves a URL -> response map and records requests."""

    def __init__(self, routes: Dict[str, Route], default_status: int = 404):
        self.routes = routes
        self.default_status = default_status
        self.requests: List[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request):
        self.requests.append(request)
        route = self.routes.get(str(request.url))
        if route is None:
            return httpx.Response(self.default_status)
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        # Fresh copy so a route can be served more than once
        return httpx.Response(route.status_code, headers=route.headers, content=route.content)

    def methods_for(self, url: str) -> List[str]:
        return [r.method for r in self.requests if str(r.url) == url]


@pytest.fixture
def make_transport():
    def _make(routes: Dict[str, Route], default_status: int = 404) -> RecordingTransport:
        return RecordingTransport(routes, default_status)
    return _make


def html_page(
    title: str = "Example Site Maintenance Page",
    description: str = "A well described page that explains what this example site offers visitors.",
    words: int = 400,
    body_extra: str = "",
) -> str:
    head = f"<title>{title}</title>" if title is not None else ""
    if description is not None:
        head += f'<meta name="description" content="{description}">'
    text = " ".join(["word"] * words)
    return f"<html><head>{head}</head><body><h1>Heading</h1><p>{text}</p>{body_extra}</body></html>"
