"""Card Studio — business-card designer backend

Responsibilities:
  1. Card profile persistence (contact-detail sets per user)
  2. Card design persistence (visual variants per profile)
  3. One default profile per user, one primary design per profile

Sessions are handled by the auth proxy in front of this service.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardstudio.config import get_settings
from cardstudio.db.session import init_db, close_db, is_db_available
from cardstudio.errors import ActionError, action_error_handler
from cardstudio.routers import profiles, designs


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: check DB. Shutdown: close DB pool."""
    await init_db()
    yield
    await close_db()


def create_app() -> FastAPI:
    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        description=(
            "Card Studio — design business cards.\n\n"
            "Users keep several card profiles (contact details) and "
            "several design variants per profile."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(ActionError, action_error_handler)

    # ─── Card profiles ───
    application.include_router(
        profiles.router, prefix="/api/profiles", tags=["Profiles"]
    )

    # ─── Card designs ───
    application.include_router(designs.router, prefix="/api/designs", tags=["Designs"])

    @application.get("/health")
    async def health_check():
        return {
            "status": "ok",
            "service": "cardstudio",
            "version": "0.1.0",
            "database": is_db_available(),
        }

    return application


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cardstudio.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=settings.debug,
    )
