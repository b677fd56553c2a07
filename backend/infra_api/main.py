from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from infra_api.core.config import settings
from infra_api.core.errors import install_exception_handlers
from infra_api.core.logging import configure_logging, logger
from infra_api.api.router import api_router
from infra_api.db.session import engine
from infra_api.db.base import Base
from infra_api.services.profanity import ProfanityFilter
import infra_api.db.models  # noqa: F401

def create_app(profanity_filter: ProfanityFilter | None = None) -> FastAPI:
    configure_logging(settings.ENV)
    app = FastAPI(title="Infrastructure Projects API", version="0.1.0")
    app.state.profanity_filter = profanity_filter or ProfanityFilter(settings.profanity_extra_words())

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=bool(origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_exception_handlers(app)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.on_event("startup")
    def _startup():
        # no migrations: missing tables are created on boot
        if settings.CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
            logger.info("database_tables_initialized")

    app.include_router(api_router)
    logger.info("app_started", env=settings.ENV)
    return app

app = create_app()

def run() -> None:
    import uvicorn
    uvicorn.run("infra_api.main:app", host="0.0.0.0", port=settings.PORT)
