"""urlshort exception hierarchy.

Shared by the mapping parser, the handler factories, and the CLI so every
module raises and catches the same types.
"""


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Raised when runtime configuration is invalid.

    Covers unreadable mapping files and unsupported redirect status codes.
    Malformed mapping *content* raises ``ParseError`` instead.
    """


class ParseError(UrlshortError):
    """Mapping data does not have the expected record shape.

    Raised only while building a lookup table, never while serving a
    request.  ``index`` and ``field`` locate the offending record when the
    document itself deserialized fine but a record did not.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.field = field
