"""Application entry point."""

from __future__ import annotations

import uvicorn

from scoreboard.api import create_api_app
from scoreboard.core.config import settings
from scoreboard.core.logging import setup_logging


setup_logging()

app = create_api_app()


def run() -> None:
    """Run the API with uvicorn."""
    uvicorn.run(
        "scoreboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_config=None,
    )


if __name__ == "__main__":
    run()
