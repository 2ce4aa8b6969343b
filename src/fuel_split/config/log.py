from __future__ import annotations

import logging

from fuel_split.config.settings import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Root handler for entry points; library modules only get loggers."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
