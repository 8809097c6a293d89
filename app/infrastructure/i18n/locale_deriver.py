"""Process locale derived from the loaded catalog.

The catalog reserves ``General.Locale`` for the locale name matching the
language (e.g. "fr_FR.UTF-8"). Applying it is best-effort: hosts that lack
the locale keep their current setting.
"""

import locale as _locale
from typing import Callable, Optional

from infrastructure.i18n.models import LOCALE_KEY, LOCALE_NAMESPACE
from infrastructure.i18n.store import CatalogStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

SetLocale = Callable[[int, Optional[str]], str]


def locale_variant(locale_name: str) -> str:
    """Return the alternate spelling some systems use ("UTF-8" -> "UTF8")."""
    return locale_name.replace("UTF-8", "UTF8")


class LocaleDeriver:
    """Applies the catalog's ``General.Locale`` entry as the process locale.

    Attributes:
        enabled: When False, apply() only reports the locale it would set.
    """

    def __init__(self, enabled: bool = True, setlocale: Optional[SetLocale] = None):
        self.enabled = enabled
        self._setlocale = setlocale or _locale.setlocale

    def apply(self, store: CatalogStore) -> Optional[str]:
        """Apply the locale named in the catalog.

        Tries the catalog value, then its variant spelling, for LC_ALL, then
        resets LC_CTYPE to the environment default. Never raises.

        Args:
            store: Catalog to read ``General.Locale`` from.

        Returns:
            The locale name that was applied, or None.
        """
        locale_name = store.get(LOCALE_NAMESPACE, LOCALE_KEY)
        if not locale_name or not isinstance(locale_name, str):
            logger.debug("catalog_locale_missing")
            return None
        if not self.enabled:
            return None

        applied = None
        for candidate in dict.fromkeys([locale_name, locale_variant(locale_name)]):
            try:
                self._setlocale(_locale.LC_ALL, candidate)
            except (_locale.Error, ValueError) as e:
                logger.debug("locale_candidate_rejected", locale=candidate, error=str(e))
                continue
            applied = candidate
            break

        if applied is None:
            logger.warning("locale_not_applied", locale=locale_name)

        # Character classification follows the environment, not the catalog
        try:
            self._setlocale(_locale.LC_CTYPE, "")
        except (_locale.Error, ValueError) as e:
            logger.debug("locale_ctype_reset_failed", error=str(e))

        if applied is not None:
            logger.info("locale_applied", locale=applied)
        return applied
