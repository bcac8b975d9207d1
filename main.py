# -*- coding: utf-8 -*-

# Tourdesk
# Copyright (C) 2025 Tourdesk contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.


"""
Tourdesk - request validation service.

Application entry point. Creates the FastAPI app, configures logging and
starts uvicorn.

Usage:
    # Using default settings (host: 0.0.0.0, port: 8000)
    python main.py

    # With CLI arguments (highest priority)
    python main.py --port 9000
    python main.py --host 127.0.0.1 --port 9000

    # With environment variables (medium priority)
    SERVER_PORT=9000 python main.py

    # Using uvicorn directly (uvicorn handles its own CLI args)
    uvicorn main:app --host 0.0.0.0 --port 8000

Priority: CLI args > Environment variables > Default values
"""

import argparse
import sys
from typing import Tuple

import uvicorn
from fastapi import FastAPI, HTTPException
from loguru import logger

from tourdesk.config import (
    APP_DESCRIPTION,
    APP_TITLE,
    APP_VERSION,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
    LOG_LEVEL,
    SERVER_HOST,
    SERVER_PORT,
)
from tourdesk.exceptions import http_exception_handler
from tourdesk.routes import router


# --- Loguru Configuration ---
logger.remove()
logger.add(
    sys.stderr,
    level=LOG_LEVEL,
    colorize=True,
    format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
)


def create_app() -> FastAPI:
    """
    Build the FastAPI application with routes and error handlers.

    Returns:
        Configured FastAPI instance
    """
    application = FastAPI(
        title=APP_TITLE,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
    )
    application.add_exception_handler(HTTPException, http_exception_handler)
    application.include_router(router)
    return application


app = create_app()


def parse_cli_args() -> argparse.Namespace:
    """
    Parse command-line arguments for server configuration.

    Returns:
        Parsed arguments namespace (host and port are None when not given)
    """
    parser = argparse.ArgumentParser(
        description=f"{APP_TITLE} - {APP_DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                        # Use defaults (0.0.0.0:8000)
  python main.py --port 9000            # Custom port
  python main.py -H 127.0.0.1 -p 9000   # Localhost only

Environment variables:
  SERVER_HOST   Server host address (default: 0.0.0.0)
  SERVER_PORT   Server port (default: 8000)
  LOG_LEVEL     Log level (default: INFO)
        """,
    )
    parser.add_argument(
        "-H",
        "--host",
        type=str,
        default=None,
        metavar="HOST",
        help=f"Server host address (default: {DEFAULT_SERVER_HOST})",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=None,
        metavar="PORT",
        help=f"Server port (default: {DEFAULT_SERVER_PORT})",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )
    return parser.parse_args()


def resolve_server_config(args: argparse.Namespace) -> Tuple[str, int]:
    """
    Resolve final host and port.

    Priority: CLI args > environment variables > defaults.

    Args:
        args: Parsed CLI arguments

    Returns:
        (host, port)
    """
    if args.host is not None:
        final_host = args.host
        logger.debug(f"Host from CLI argument: {final_host}")
    elif SERVER_HOST != DEFAULT_SERVER_HOST:
        final_host = SERVER_HOST
        logger.debug(f"Host from environment: {final_host}")
    else:
        final_host = DEFAULT_SERVER_HOST
        logger.debug(f"Host using default: {final_host}")

    if args.port is not None:
        final_port = args.port
        logger.debug(f"Port from CLI argument: {final_port}")
    elif SERVER_PORT != DEFAULT_SERVER_PORT:
        final_port = SERVER_PORT
        logger.debug(f"Port from environment: {final_port}")
    else:
        final_port = DEFAULT_SERVER_PORT
        logger.debug(f"Port using default: {final_port}")

    return final_host, final_port


def print_startup_banner(host: str, port: int) -> None:
    """
    Print the startup banner with server URLs.

    Args:
        host: Bound host
        port: Bound port
    """
    display_host = "localhost" if host == "0.0.0.0" else host
    base_url = f"http://{display_host}:{port}"

    print()
    print(f"  {APP_TITLE} v{APP_VERSION}")
    print()
    print(f"  Server:  {base_url}")
    print(f"  Docs:    {base_url}/docs")
    print(f"  Health:  {base_url}/health")
    print()


if __name__ == "__main__":
    cli_args = parse_cli_args()
    host, port = resolve_server_config(cli_args)
    print_startup_banner(host, port)
    logger.info(f"Starting {APP_TITLE} on {host}:{port} (log level {LOG_LEVEL})")
    uvicorn.run(app, host=host, port=port)
