from fastapi import APIRouter, Depends, status

from authors_api.auth import service
from authors_api.auth.dependencies import get_current_claims
from authors_api.core.errors import error_response
from authors_api.schemas.auth import LoginRequest, TokenResponse
from authors_api.store.user_store import UserStore
from authors_api.routes.table import Route, register_routes

AUTH_ROUTES = (
    Route('POST', '/login', 'login', status.HTTP_200_OK, TokenResponse),
    Route('GET', '/me', 'me', status.HTTP_200_OK),
)

PROTECTED_ROUTES = (
    Route('GET', '/protected', 'protected', status.HTTP_200_OK),
)


class AuthHandlers:
    def __init__(self, users: UserStore):
        self.users = users

    def login(self, data: LoginRequest):
        result = service.login(self.users, data.username, data.password)
        if not result.ok:
            return error_response(result.error)
        return result.value

    def me(self, claims: dict = Depends(get_current_claims)):
        return {'username': claims['sub']}

    def protected(self, claims: dict = Depends(get_current_claims)):
        return {
            'message': f"Hello {claims['sub']}, your token is valid.",
            'username': claims['sub'],
            'expires_at': claims['exp'],
        }


def build_auth_router(users: UserStore) -> APIRouter:
    router = APIRouter(prefix='/auth', tags=['auth'])
    return register_routes(router, AUTH_ROUTES, AuthHandlers(users))


def build_protected_router(users: UserStore) -> APIRouter:
    router = APIRouter(tags=['protected'])
    return register_routes(router, PROTECTED_ROUTES, AuthHandlers(users))
