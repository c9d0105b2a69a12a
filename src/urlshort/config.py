"""Shortener configuration.

ShortenerConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from urlshort.errors import ConfigurationError

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


def check_redirect_status(status: int) -> int:
    """Return *status* if it is a redirect code, else raise ``ConfigurationError``."""
    if status not in REDIRECT_STATUSES:
        allowed = ", ".join(str(s) for s in sorted(REDIRECT_STATUSES))
        msg = f"Unsupported redirect status {status!r}. Use one of: {allowed}"
        raise ConfigurationError(msg)
    return status


@dataclass(frozen=True, slots=True)
class ShortenerConfig:
    """Shortener configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ShortenerConfig(mapping_file="paths.yaml", port=3000)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Mapping source, YAML unless the suffix is .json
    mapping_file: str | Path | None = None

    # See Other unless overridden
    redirect_status: int = 303

    log_level: str = "info"
