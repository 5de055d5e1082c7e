"""Run the fake identity server: ``python -m catauth.server``."""

from __future__ import annotations

import logging

import uvicorn

from catauth.core.config import load_settings


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "catauth.server.main:app",
        host=settings.catauth_server_host,
        port=settings.catauth_server_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
