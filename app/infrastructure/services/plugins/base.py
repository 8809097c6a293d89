"""Package-based plugin discovery."""

import importlib
import pkgutil
from pathlib import Path
from typing import Iterable

import pluggy

from infrastructure.logging import get_module_logger

logger = get_module_logger()

# this file is at .../app/infrastructure/services/plugins/base.py
APP_ROOT = Path(__file__).resolve().parents[3]


def auto_discover_plugins(pm: pluggy.PluginManager, base_paths: Iterable[str]) -> None:
    """Import and register every sub-package of the given base packages.

    Each sub-package is registered under its dotted module name, so pluggy
    picks up whatever ``hookimpl`` functions its ``__init__`` defines.
    Packages registered earlier are skipped. A package that fails to import
    is logged and skipped; discovery carries on with the others.

    Args:
        pm: Plugin manager to register with.
        base_paths: Base package names under the application root, e.g.
            ``["modules"]``.
    """
    for base_path in base_paths:
        directory = APP_ROOT / base_path
        if not directory.is_dir():
            logger.warning("plugin_base_path_not_found", path=str(directory))
            continue

        for pkg_info in pkgutil.iter_modules([str(directory)]):
            if not pkg_info.ispkg:
                continue
            module_name = f"{base_path}.{pkg_info.name}"
            if pm.get_plugin(module_name) is not None:
                continue
            try:
                module = importlib.import_module(module_name)
                pm.register(module, name=module_name)
            except Exception as e:  # pylint: disable=broad-except
                logger.error(
                    "plugin_registration_failed",
                    module=module_name,
                    error=str(e),
                    exc_info=True,
                )
                continue
            logger.debug("plugin_registered", module=module_name)
