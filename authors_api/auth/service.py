"""
Token issuing and validation.

``login`` exchanges a username/password pair for a signed access token.
``validate`` turns a presented token back into its claims. Both return
``Result`` values; the HTTP layer decides how to render failures.
"""

import logging

import jwt

from authors_api.auth import jwt_handler, security
from authors_api.core import config
from authors_api.core.result import ErrorKind, Result
from authors_api.schemas.auth import TokenResponse
from authors_api.store.user_store import UserStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid username or password.'


def login(users: UserStore, username: str, password: str) -> Result[TokenResponse]:
    found = users.get_by_username(username)
    if not found.ok:
        if found.error.kind is ErrorKind.NOT_FOUND:
            logger.warning('Login rejected for unknown user %r.', username)
            return Result.unauthorized(INVALID_CREDENTIALS)
        return Result(error=found.error)

    if not security.verify_password(password, found.value.password_hash):
        logger.warning('Login rejected for user %r: password mismatch.', username)
        return Result.unauthorized(INVALID_CREDENTIALS)

    token = jwt_handler.create_access_token(subject=found.value.username)
    logger.info('Issued access token for user %r.', found.value.username)
    return Result.success(
        TokenResponse(access_token=token, expires_in=config.JWT_EXPIRES_MINUTES * 60)
    )


def validate(token: str | None) -> Result[dict]:
    raw = (token or '').strip()
    if not raw:
        return Result.unauthorized('Missing bearer token.')

    try:
        payload = jwt_handler.decode_access_token(raw)
    except jwt.ExpiredSignatureError:
        return Result.unauthorized('Token has expired.')
    except jwt.InvalidTokenError:
        return Result.unauthorized('Invalid token.')

    subject = str(payload.get('sub') or '').strip()
    if not subject:
        return Result.unauthorized('Invalid token subject.')
    return Result.success(payload)
