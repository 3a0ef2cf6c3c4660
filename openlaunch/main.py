import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

from openlaunch.api.api_v1.router import api_router
from openlaunch.core.config import Settings, get_settings
from openlaunch.core.logging import bind_request_id, configure_logging, get_logger
from openlaunch.db.init_db import init_db
from openlaunch.db.session import build_engine, build_sessionmaker

log = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(debug=settings.debug, log_level=settings.log_level)
        engine = build_engine(settings)
        await init_db(engine)
        app.state.engine = engine
        app.state.sessionmaker = build_sessionmaker(engine)
        log.info("startup", environment=settings.environment)
        yield
        await engine.dispose()
        log.info("shutdown")

    app = FastAPI(
        title=settings.app_name,
        default_response_class=ORJSONResponse,
        openapi_url=f"{settings.api_v1_str}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.include_router(api_router, prefix=settings.api_v1_str)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        bind_request_id(request_id)
        start = time.perf_counter()
        response = await call_next(request)
        log.info(
            "request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    async def root() -> dict:
        return {"service": settings.app_name, "api": settings.api_v1_str}

    return app


def run() -> None:
    import uvicorn

    uvicorn.run("openlaunch.main:create_app", factory=True, host="0.0.0.0", port=8000, reload=True)
