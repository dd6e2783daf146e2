"""Parse result container."""

from collections.abc import Mapping
from typing import Dict, Iterator, Optional


class MetadataStore(Mapping):
    """Ordered mapping of field name to string value.

    The walker fills a store while it decodes chunks and freezes it before
    handing it back, after which any attempt to modify it raises TypeError.
    Two stores (or a store and a plain dict) compare equal when they hold the
    same items.
    """

    def __init__(self, fields: Optional[Mapping] = None):
        self._fields: Dict[str, str] = {}
        self._frozen = False
        if fields is not None:
            self.update(fields)

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __setitem__(self, key: str, value: str) -> None:
        if self._frozen:
            raise TypeError("MetadataStore is frozen")
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f"MetadataStore keys and values must be str, got {key!r}: {value!r}"
            )
        self._fields[key] = value

    def update(self, fields: Mapping) -> None:
        for key, value in fields.items():
            self[key] = value

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "MetadataStore":
        self._frozen = True
        return self

    def to_dict(self) -> Dict[str, str]:
        return dict(self._fields)

    def __repr__(self):
        return f"MetadataStore({self._fields!r})"
