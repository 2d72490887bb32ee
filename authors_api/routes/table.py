"""
Explicit route tables.

Each router lists its endpoints as ``Route`` rows and binds them to handler
methods on an object built around an explicitly constructed store.
"""

from typing import Any, NamedTuple, Sequence

from fastapi import APIRouter


class Route(NamedTuple):
    method: str
    path: str
    handler: str
    status_code: int
    response_model: Any = None


def register_routes(router: APIRouter, routes: Sequence[Route], handlers: object) -> APIRouter:
    for route in routes:
        router.add_api_route(
            route.path,
            getattr(handlers, route.handler),
            methods=[route.method],
            status_code=route.status_code,
            response_model=route.response_model,
            name=route.handler,
        )
    return router
