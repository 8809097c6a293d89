from typing import NoReturn

from fastapi import APIRouter, HTTPException, Request, Response

from api.dependencies.rate_limits import TRANSLATIONS_RATE_LIMIT, get_limiter
from infrastructure.i18n import (
    InvalidLanguageCode,
    LanguageFileNotFound,
    TranslationError,
)
from infrastructure.logging import bind_language_context, get_module_logger
from infrastructure.services import SettingsDep, TranslatorDep

router = APIRouter(tags=["Translations"])
limiter = get_limiter()
logger = get_module_logger()


def _raise_http_error(error: TranslationError) -> NoReturn:
    if isinstance(error, InvalidLanguageCode):
        raise HTTPException(status_code=400, detail=str(error)) from error
    if isinstance(error, LanguageFileNotFound):
        raise HTTPException(status_code=404, detail=str(error)) from error
    logger.error("translation_request_failed", error=str(error))
    raise HTTPException(status_code=500, detail="Translation catalog error") from error


# Client-side translation table. The language comes from the request
# parameter unless a get_language hook overrides it.
@router.get("/translations.js")
@limiter.limit(TRANSLATIONS_RATE_LIMIT)
def get_translations_script(
    request: Request, translator: TranslatorDep, settings: SettingsDep
):
    param = settings.translations.LANGUAGE_REQUEST_PARAM
    with translator.resolver.context(), bind_language_context(
        request_path=request.url.path
    ):
        language = translator.resolver.resolve(request.query_params.get(param, ""))
        try:
            _, script = translator.export_language(language or None)
        except TranslationError as e:
            _raise_http_error(e)
    return Response(content=script, media_type="application/javascript")


@router.get("/translations/{language}")
@limiter.limit(TRANSLATIONS_RATE_LIMIT)
def get_translations(language: str, request: Request, translator: TranslatorDep):
    """Client-side translations for ``language`` as JSON."""
    with bind_language_context(language=language, request_path=request.url.path):
        try:
            with translator.store.lock:
                loaded = translator.reload_language(language)
                translations = translator.exporter.build_translations()
        except TranslationError as e:
            _raise_http_error(e)
    return {"language": loaded, "translations": translations}
