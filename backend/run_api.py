#!/usr/bin/env python
"""
Start the Tiriwe API under uvicorn.

    python run_api.py                   # settings from TIRIWE_* / .env
    python run_api.py --reload          # development
    python run_api.py --log-level DEBUG # show every gate decision
"""

import argparse
import logging

import uvicorn

from api.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Tiriwe API server")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--host", type=str, help="Interface to bind")
    parser.add_argument("--port", type=int, help="Port to bind")
    parser.add_argument("--log-level", type=str, help="Root log level (default from TIRIWE_LOG_LEVEL)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    settings = get_settings()
    level = (args.log_level or settings.log_level).upper()

    logging.basicConfig(level=level, format=LOG_FORMAT)

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=level.lower(),
    )


if __name__ == "__main__":
    main()
