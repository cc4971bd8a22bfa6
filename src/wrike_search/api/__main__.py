"""
wrike_search.api.__main__

Entrypoint for `python -m wrike_search.api` and the `wrike-search` console script.
"""

from __future__ import annotations

import uvicorn

from wrike_search.api.app import create_app
from wrike_search.settings import get_settings


def main() -> None:
    settings = get_settings()

    uvicorn.run(
        create_app(settings=settings),
        host=settings.api_host,
        port=settings.api_port,
        # Uvicorn's own dictConfig would replace the structlog/stdlib setup.
        log_config=None,
        ws="auto",
    )


if __name__ == "__main__":
    main()
