# main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Config
from app.layout_defaults import initial_layout
from app.routes import layout
from app.services.gemini import GeminiLayoutTransformer
from app.services.session import SessionStore


def configure_logging():
    logging.basicConfig(
        level=logging.DEBUG if Config.DEBUG else Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(transformer=None) -> FastAPI:
    app = FastAPI(title="AI Blueprint Editor")

    # --- Add CORS Middleware ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Credentials are bound here, once, rather than read by the services.
    if transformer is None:
        transformer = GeminiLayoutTransformer.from_config(Config)
    app.state.sessions = SessionStore(transformer, initial_layout, max_sessions=Config.MAX_SESSIONS)

    app.include_router(layout.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


configure_logging()
app = create_app()
