"""Annotated dependencies for route signatures."""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import Translator
from infrastructure.services.providers import get_settings, get_translator

SettingsDep = Annotated[Settings, Depends(get_settings)]

TranslatorDep = Annotated[Translator, Depends(get_translator)]
