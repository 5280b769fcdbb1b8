"""Immutable query string parameters.

Implements ``Mapping[str, str]``: ``__getitem__`` returns the first value
for a key, ``get_list`` returns all of them.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Accepts a raw query string (``"event_id=7&origin=calendar"``) or a
    mapping of already-split values::

        QueryParams("preview=12")
        QueryParams({"preview": "12"})
        QueryParams({"tag": ["a", "b"]})
    """

    _data: dict[str, list[str]]

    __slots__ = ("_data",)

    def __init__(self, query: str | Mapping[str, str | list[str]] = "") -> None:
        if isinstance(query, str):
            parsed = parse_qs(query.lstrip("?"), keep_blank_values=True)
        else:
            parsed = {
                key: [value] if isinstance(value, str) else list(value)
                for key, value in query.items()
            }
        object.__setattr__(self, "_data", parsed)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "QueryParams is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))
