import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .core.config import Settings, settings as default_settings
from .core.errors import BookingError
from .core.logging import setup_logging
from .routers import bookings, catalog, coupons, health, reports
from .services.bookings import BookingManager
from .services.coupons import CouponEngine
from .services.record_store import RecordStore, build_store

logger = logging.getLogger(__name__)


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(BookingError)
    async def _booking_error(request: Request, exc: BookingError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.kind, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app(settings: Settings | None = None, store: RecordStore | None = None) -> FastAPI:
    settings = settings or default_settings
    store = store or build_store(settings)

    setup_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.settings = settings
    app.state.store = store
    # el flag demo se inyecta aquí; el dominio no lee el entorno
    app.state.bookings = BookingManager(store, mock_mode=settings.mock_mode)
    app.state.coupons = CouponEngine(store)

    install_error_handlers(app)
    app.include_router(health.router)
    app.include_router(catalog.router)
    app.include_router(bookings.router)
    app.include_router(coupons.router)
    app.include_router(reports.router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8010, log_config=None)


if __name__ == "__main__":
    run()
