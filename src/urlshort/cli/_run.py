"""``urlshort run``: load a mapping file and serve it.

CLI flags override ``ShortenerConfig`` defaults.  Unmapped paths get the
plain 404 fallback.
"""

import argparse
import logging
import sys
from dataclasses import replace

from urlshort.config import ShortenerConfig
from urlshort.errors import ConfigurationError, ParseError
from urlshort.handler import file_handler, not_found


def config_from_args(args: argparse.Namespace, base: ShortenerConfig | None = None) -> ShortenerConfig:
    """Overlay the flags the user actually passed onto *base*."""
    config = base or ShortenerConfig()
    overrides: dict[str, object] = {"mapping_file": args.mapping}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.status is not None:
        overrides["redirect_status"] = args.status
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return replace(config, **overrides)


def run_server(args: argparse.Namespace) -> None:
    """Build the redirect handler, then hand it to the dev server."""
    config = config_from_args(args)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        handler = file_handler(config.mapping_file, not_found, status=config.redirect_status)
    except (ConfigurationError, ParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from urlshort.server.dev import run_dev_server

    run_dev_server(handler, config.host, config.port)
