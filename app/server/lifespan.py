"""Application lifespan: logging, plugin discovery and the baseline catalog."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from infrastructure.i18n import TranslationError
from infrastructure.logging import bind_language_context, configure_logging
from infrastructure.services import get_settings, get_translator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = configure_logging(settings=settings)
    logger.info(
        "configuration_loaded",
        translations=settings.translations.model_dump(mode="json"),
        log_level=settings.LOG_LEVEL,
        git_sha=settings.GIT_SHA,
    )

    translator = get_translator()
    default_language = translator.language_default
    with bind_language_context(language=default_language):
        try:
            translator.load_core_translation(default_language)
        except TranslationError as e:
            logger.critical("default_language_load_failed", error=str(e))
            raise
    app.state.translator = translator
    logger.info(
        "translation_catalog_ready",
        default_language=default_language,
        namespace_count=len(translator.store),
    )

    yield

    logger.info("translation_catalog_shutdown")
