"""
Run the API with uvicorn: `python -m api`.

Listens on $PORT (default 3000).
"""
from __future__ import annotations

import logging

import uvicorn

from api.deps import get_settings


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = get_settings()
    logging.getLogger(__name__).info("tmdb-images-api listening on port %s", settings.port)
    uvicorn.run("api.main:app", host="0.0.0.0", port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
