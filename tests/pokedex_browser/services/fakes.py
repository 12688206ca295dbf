from __future__ import annotations

from typing import Any, Dict, Optional

import requests


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, bad_json: bool = False):
        self._payload = payload
        self.status_code = status_code
        self._bad_json = bad_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if self._bad_json:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Routes GET requests by URL to canned FakeResponses (or exceptions)."""

    def __init__(self, routes: Dict[str, Any]):
        self.routes = routes
        self.headers: Dict[str, str] = {}
        self.calls: list[tuple[str, Optional[dict]]] = []
        self.closed = False

    def get(self, url: str, params: Optional[dict] = None, timeout: Optional[float] = None):
        self.calls.append((url, params))
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(status_code=404)
        if isinstance(route, Exception):
            raise route
        return route

    def close(self) -> None:
        self.closed = True


BASE = "https://pokeapi.test/api/v2"


def detail_payload(i: int, type_name: str = "normal") -> dict:
    return {
        "id": i,
        "name": f"mon-{i}",
        "height": i % 21,
        "weight": i * 10,
        "types": [{"slot": 1, "type": {"name": type_name}}],
        "sprites": {"front_default": f"https://img/{i}.png"},
    }


def catalog_routes(n: int) -> Dict[str, Any]:
    routes: Dict[str, Any] = {
        f"{BASE}/pokemon": FakeResponse(
            {"results": [{"name": f"mon-{i}", "url": f"{BASE}/pokemon/{i}/"} for i in range(1, n + 1)]}
        ),
        f"{BASE}/type": FakeResponse({"results": [{"name": "fire"}, {"name": "grass"}]}),
    }
    for i in range(1, n + 1):
        routes[f"{BASE}/pokemon/{i}/"] = FakeResponse(detail_payload(i))
    return routes
