"""Process Entry Point — `leximap` console script.

Invariants:
    - Listens on settings.host:settings.port (PORT env override, default 8787)
"""

import logging

import uvicorn

from leximap.config import get_settings
from leximap.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def run() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"LexiMap API listening on http://localhost:{settings.port}")
    uvicorn.run(
        "leximap.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
