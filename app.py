"""
Cool Names service entry point.

Run with:
    uvicorn app:app
or:
    python app.py
"""
import sys

from fastapi import FastAPI
from loguru import logger

from cool_names.config import Settings, settings
from cool_names.errors import DomainError
from cool_names.http import create_app
from cool_names.name_generator import NameGeneratorService
from cool_names.word_repository import FileWordRepository


def build_app(settings: Settings) -> FastAPI:
    repository = FileWordRepository(settings.ADJECTIVES_FILE, settings.NOUNS_FILE)
    name_generator = NameGeneratorService(repository)

    return create_app(name_generator, cors_origins=settings.CORS_ORIGINS)


UVICORN_LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


def uvicorn_log_level(level: str) -> str:
    """Map a loguru level name onto one uvicorn accepts (SUCCESS becomes info)."""
    level = level.lower()
    return level if level in UVICORN_LOG_LEVELS else "info"


def configure_logging(level: str):
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


try:
    app = build_app(settings)
except DomainError as e:
    logger.error(f"Error initializing generator: {e}")
    sys.exit(1)


def main():
    import uvicorn

    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Server running on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=uvicorn_log_level(settings.LOG_LEVEL))


if __name__ == "__main__":
    main()
