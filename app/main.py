"""Entry point: serve the translation endpoints with uvicorn."""

import uvicorn

from infrastructure.configuration import settings
from infrastructure.logging import configure_logging, get_module_logger
from server.server import handler

logger = get_module_logger()


def main():
    configure_logging(settings=settings)
    logger.info(
        "server_starting",
        host=settings.HOST,
        port=settings.PORT,
        default_language=settings.translations.DEFAULT_LANGUAGE,
    )
    uvicorn.run(handler, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
