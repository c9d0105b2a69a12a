"""``urlshort check``: parse a mapping file and list its redirects."""

import argparse
import sys

from urlshort.errors import ConfigurationError, ParseError
from urlshort.mapping import load_mapping


def run_check(args: argparse.Namespace) -> None:
    """Print each ``path -> url`` pair, or the parse error and exit 1."""
    try:
        table = load_mapping(args.mapping)
    except (ConfigurationError, ParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for path, url in table.items():
        print(f"  {path} -> {url}")
    noun = "redirect" if len(table) == 1 else "redirects"
    print(f"{len(table)} {noun} OK")
