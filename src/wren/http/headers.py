"""Read-only request headers.

Built once from ASGI byte pairs or host-supplied strings. Names are folded to
lower case and repeated fields are joined with ``", "``, so a client that
splits ``Accept`` across several lines is read the same as one that doesn't.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType


class Headers(Mapping[str, str]):
    """Case-insensitive request headers, one combined value per name."""

    __slots__ = ("_values",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        values: dict[str, str] = {}
        for name, value in raw:
            key = name.decode("latin-1").lower()
            text = value.decode("latin-1").strip()
            values[key] = f"{values[key]}, {text}" if key in values else text
        self._values: Mapping[str, str] = MappingProxyType(values)

    @classmethod
    def from_pairs(cls, pairs: Mapping[str, str] | Iterable[tuple[str, str]]) -> "Headers":
        """Build headers from string pairs or a plain ``dict``."""
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        return cls((k.encode("latin-1"), v.encode("latin-1")) for k, v in items)

    def __getitem__(self, key: str) -> str:
        if not isinstance(key, str):
            raise KeyError(key)
        return self._values[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Headers({dict(self._values)!r})"
