import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from backend.library import init_library
from backend.routes import router

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_SONGS_DIR = Path(__file__).parent.parent / "songs"


def create_app(songs_dir: Path | None = None) -> FastAPI:
    resolved = songs_dir or Path(os.getenv("SONGS_DIR", str(DEFAULT_SONGS_DIR)))
    init_library(resolved)

    app = FastAPI(title="Card Draw")
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (uses SONGS_DIR env var or default)
app = create_app()
