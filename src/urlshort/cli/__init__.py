"""urlshort CLI: serve or check a redirect mapping file.

Entry point registered as ``urlshort`` in ``pyproject.toml``::

    [project.scripts]
    urlshort = "urlshort.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``urlshort`` command."""
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="urlshort: serve HTTP redirects from a path -> url mapping file.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- urlshort run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve redirects from a mapping file")
    run_parser.add_argument("mapping", help="Mapping file (.yaml/.yml, or .json)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--status",
        type=int,
        default=None,
        help="Redirect status code (default 303)",
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging level (debug logs every redirect)",
    )

    # -- urlshort check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a mapping file")
    check_parser.add_argument("mapping", help="Mapping file (.yaml/.yml, or .json)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from urlshort.cli._run import run_server

        run_server(args)
    elif args.command == "check":
        from urlshort.cli._check import run_check

        run_check(args)
