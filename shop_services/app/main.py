"""
Application factories for the cart, order and product services.

Each service is a separate FastAPI application.  The factories set up
logging, register the shared error handlers, include the service router
and, for the stateful services, attach a fresh ``RecordStore`` to
``app.state.store``.  Calling a factory again yields an independent
application with an empty store, which is what the tests rely on.

The factories can be served directly with uvicorn, e.g.::

    uvicorn --factory shop_services.app.main:create_cart_app --port 3000

``run.py`` at the project root wraps the same factories in a small CLI.
"""

from typing import Optional

from fastapi import APIRouter, FastAPI, Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from .api.router import cart_router, order_router, product_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import current_service, setup_logging
from .core.store import RecordStore


def _build_app(
    service: str,
    router: APIRouter,
    *,
    store: Optional[RecordStore],
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or default_settings
    # Initialise logging before anything else so that everything below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=f"{settings.project_name}: {service}",
        version=settings.api_version,
        debug=settings.debug,
    )
    app.state.service_name = service
    if store is not None:
        app.state.store = store

    @app.middleware("http")
    async def service_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Records logged while handling the request carry this service name.
        token = current_service.set(service)
        try:
            return await call_next(request)
        finally:
            current_service.reset(token)

    register_error_handlers(app)
    app.include_router(router)
    return app


def create_cart_app(store: Optional[RecordStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create the cart service.  ``store`` defaults to a new empty store."""
    if store is None:
        store = RecordStore("cart")
    return _build_app("cart", cart_router, store=store, settings=settings)


def create_order_app(store: Optional[RecordStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create the order service.  ``store`` defaults to a new empty store."""
    if store is None:
        store = RecordStore("orders")
    return _build_app("orders", order_router, store=store, settings=settings)


def create_product_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the product service.  The catalogue is static, so no store."""
    return _build_app("products", product_router, store=None, settings=settings)


APP_FACTORIES = {
    "cart": create_cart_app,
    "order": create_order_app,
    "product": create_product_app,
}

