"""Mapping parser: structured path/url records to a read-only lookup table.

The input is a list of records, usually YAML::

    - path: /some-path
      url: https://www.some-url.com/demo

Records are applied in order, so a repeated path keeps the *last* url.
Extra keys on a record are ignored.  Anything else that does not have
this shape raises ``ParseError``; no partial table is ever returned.
"""

from __future__ import annotations

import json as json_module
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypeAlias

import yaml

from urlshort.errors import ConfigurationError, ParseError

logger = logging.getLogger("urlshort.mapping")

LookupTable: TypeAlias = MappingProxyType[str, str]

_JSON_SUFFIXES = frozenset({".json"})


@dataclass(frozen=True, slots=True)
class MappingRecord:
    """A single path -> url entry, as written in the config document."""

    path: str
    url: str

    @classmethod
    def from_data(cls, item: object, index: int) -> MappingRecord:
        """Validate one deserialized record."""
        if not isinstance(item, Mapping):
            msg = f"record {index}: expected a mapping with 'path' and 'url', got {type(item).__name__}"
            raise ParseError(msg, index=index)
        values: dict[str, str] = {}
        for name in ("path", "url"):
            if name not in item:
                msg = f"record {index}: missing required field {name!r}"
                raise ParseError(msg, index=index, field=name)
            value = item[name]
            if not isinstance(value, str):
                msg = f"record {index}: field {name!r} must be a string, got {type(value).__name__}"
                raise ParseError(msg, index=index, field=name)
            values[name] = value
        return cls(path=values["path"], url=values["url"])


def parse_records(data: Any) -> LookupTable:
    """Build a lookup table from already-deserialized records.

    ``None`` (an empty document) yields an empty table.
    """
    if data is None:
        data = []
    if not isinstance(data, list | tuple):
        msg = f"expected a list of path/url records, got {type(data).__name__}"
        raise ParseError(msg)

    table: dict[str, str] = {}
    for index, item in enumerate(data):
        record = MappingRecord.from_data(item, index)
        logger.debug("%s: %s", record.path, record.url)
        table[record.path] = record.url
    return MappingProxyType(table)


def parse_yaml(text: str | bytes) -> LookupTable:
    """Parse a YAML list of path/url records."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        msg = f"invalid YAML: {exc}"
        raise ParseError(msg) from exc
    return parse_records(data)


def parse_json(text: str | bytes) -> LookupTable:
    """Parse a JSON array of path/url objects."""
    try:
        data = json_module.loads(text)
    except ValueError as exc:
        msg = f"invalid JSON: {exc}"
        raise ParseError(msg) from exc
    return parse_records(data)


def load_mapping(path: str | Path) -> LookupTable:
    """Read a mapping file, choosing JSON or YAML by its suffix.

    Raises:
        ConfigurationError: If the file cannot be read.
        ParseError: If its content is malformed.
    """
    source = Path(path)
    try:
        # Decoding is left to the parsers, so a bad encoding is a ParseError
        raw = source.read_bytes()
    except OSError as exc:
        msg = f"cannot read mapping file {str(source)!r}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc

    if source.suffix.lower() in _JSON_SUFFIXES:
        table = parse_json(raw)
    else:
        table = parse_yaml(raw)
    logger.info("Loaded %d redirect(s) from %s", len(table), source)
    return table
