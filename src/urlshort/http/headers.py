"""Immutable, case-insensitive HTTP headers.

Wraps the raw byte pairs from the ASGI scope and decodes on access.
"""

from collections.abc import Iterator, Mapping


def _fold(name: str) -> bytes:
    return name.lower().encode("latin-1")


class Headers(Mapping[str, str]):
    """Read-only header view keyed by lower-cased name.

    Indexing returns the first value; ``get_list`` returns every value
    sent under a name.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        object.__setattr__(self, "_raw", tuple(raw))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Headers is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        values = self.get_list(key)
        if not values:
            raise KeyError(key)
        return values[0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and bool(self.get_list(key))

    def __iter__(self) -> Iterator[str]:
        names = dict.fromkeys(name.decode("latin-1").lower() for name, _ in self._raw)
        return iter(names)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Headers({dict(self.items())!r})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in the order they were received."""
        folded = _fold(key)
        return [value.decode("latin-1") for name, value in self._raw if name.lower() == folded]

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Raw header byte pairs, as the ASGI server sent them."""
        return self._raw
