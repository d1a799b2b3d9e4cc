from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from infrastructure.services import get_request_culture_negotiator, get_settings
from server.lifespan import lifespan
from server.localization import RequestLocalizationMiddleware


def create_app() -> FastAPI:
    """Build the FastAPI application with request localization enabled."""
    settings = get_settings()
    app = FastAPI(lifespan=lifespan)

    allow_origins = (
        ["*"]
        if settings.is_production
        else [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        RequestLocalizationMiddleware, negotiator=get_request_culture_negotiator()
    )

    app.include_router(api_router)
    return app


handler = create_app()
