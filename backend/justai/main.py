import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from justai.config import DEFAULT_JWT_SECRET, Settings
from justai.database import get_db, get_engine, get_session_factory, init_db
from justai.exceptions import JustAIError
from justai.routers import auth, community, jobs, support, users

logger = logging.getLogger("justai")


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        init_db(app.state.engine)
        logger.info("Database schema ready.")
    except SQLAlchemyError as exc:
        # Keep serving; /check-db reports the failure.
        logger.error("Could not initialize database schema: %s", exc)
    yield
    app.state.engine.dispose()


def _install_error_handlers(app: FastAPI):
    @app.exception_handler(JustAIError)
    async def justai_error_handler(request: Request, exc: JustAIError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail, "code": exc.code},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        fields = [".".join(str(p) for p in err.get("loc", ()) if p != "body") for err in exc.errors()]
        logger.info("Rejected request to %s: invalid %s", request.url.path, fields)
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request.", "code": "VALIDATION_ERROR", "fields": fields},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error.", "code": "INTERNAL_ERROR"},
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="JustAI Jobs",
        description="Job marketplace backend: accounts, job search, applications and dashboards",
        version="0.1.0",
        lifespan=lifespan,
    )
    if settings.jwt_secret == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is not set; tokens are signed with the built-in development key.")
    app.state.settings = settings
    app.state.engine = get_engine(settings)
    app.state.session_factory = get_session_factory(app.state.engine)

    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentials only with an explicit origin list.
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _install_error_handlers(app)

    app.include_router(auth.router, prefix=settings.api_prefix)
    app.include_router(jobs.router, prefix=settings.api_prefix)
    app.include_router(users.router, prefix=settings.api_prefix)
    app.include_router(community.router, prefix=settings.api_prefix)
    app.include_router(support.router, prefix=settings.api_prefix)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "JustAI Jobs Backend is running"

    @app.get("/check-db")
    def check_db(db: Session = Depends(get_db)):
        try:
            now = db.execute(text("SELECT CURRENT_TIMESTAMP")).scalar()
        except SQLAlchemyError:
            logger.exception("DB check failed")
            return JSONResponse(
                status_code=500,
                content={"status": "error", "message": "DB connection failed"},
            )
        return {"status": "success", "time": str(now)}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
