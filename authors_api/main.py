import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from authors_api import database
from authors_api.core import config
from authors_api.core.errors import register_error_handlers
from authors_api.routes import auth_routes, author_routes
from authors_api.store.author_store import AuthorStore
from authors_api.store.user_store import UserStore

logger = logging.getLogger(__name__)


def create_app(bind: Engine | None = None, require_auth: bool | None = None) -> FastAPI:
    bind = bind if bind is not None else database.engine
    if require_auth is None:
        require_auth = config.AUTHORS_REQUIRE_AUTH

    session_factory = database.build_session_factory(bind)
    author_store = AuthorStore(session_factory)
    user_store = UserStore(session_factory)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        config.configure_logging()
        config.validate_runtime_config()
        database.try_init_database(bind)
        logger.info('Authors API started (author routes protected: %s).', require_auth)
        yield

    app = FastAPI(title='Authors API', lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_error_handlers(app)

    @app.get('/')
    def root():
        return {'status': 'Authors API Running'}

    app.include_router(author_routes.build_author_router(author_store, require_auth=require_auth), prefix='/api')
    app.include_router(auth_routes.build_auth_router(user_store), prefix='/api')
    app.include_router(auth_routes.build_protected_router(user_store), prefix='/api')

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == '__main__':
    run()
