from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status

from authors_api.auth.dependencies import get_current_claims
from authors_api.core.errors import error_response
from authors_api.database import MAX_INTEGER
from authors_api.schemas.author import AuthorDraft, AuthorRecord
from authors_api.store.author_store import AuthorStore
from authors_api.routes.table import Route, register_routes

AuthorId = Annotated[int, Path(le=MAX_INTEGER)]

AUTHOR_ROUTES = (
    Route('GET', '', 'list_authors', status.HTTP_200_OK, list[AuthorRecord]),
    Route('GET', '/{author_id}', 'get_author', status.HTTP_200_OK, AuthorRecord),
    Route('POST', '', 'create_author', status.HTTP_201_CREATED, AuthorRecord),
    Route('PUT', '/{author_id}', 'update_author', status.HTTP_204_NO_CONTENT),
    Route('DELETE', '/{author_id}', 'delete_author', status.HTTP_204_NO_CONTENT),
)


class AuthorHandlers:
    """Translate author store results into HTTP responses."""

    def __init__(self, store: AuthorStore):
        self.store = store

    def list_authors(self):
        result = self.store.list()
        if not result.ok:
            return error_response(result.error)
        return result.value

    def get_author(self, author_id: AuthorId):
        result = self.store.get(author_id)
        if not result.ok:
            return error_response(result.error)
        return result.value

    def create_author(self, draft: AuthorDraft, request: Request, response: Response):
        result = self.store.create(draft)
        if not result.ok:
            return error_response(result.error)

        response.headers['Location'] = str(request.url_for('get_author', author_id=str(result.value.id)))
        return result.value

    def update_author(self, author_id: AuthorId, draft: AuthorDraft):
        result = self.store.update(author_id, draft)
        if not result.ok:
            return error_response(result.error)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    def delete_author(self, author_id: AuthorId):
        result = self.store.delete(author_id)
        if not result.ok:
            return error_response(result.error)
        return Response(status_code=status.HTTP_204_NO_CONTENT)


def build_author_router(store: AuthorStore, require_auth: bool = False) -> APIRouter:
    dependencies = [Depends(get_current_claims)] if require_auth else []
    router = APIRouter(prefix='/authors', tags=['authors'], dependencies=dependencies)
    return register_routes(router, AUTHOR_ROUTES, AuthorHandlers(store))
