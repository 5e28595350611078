# items.py
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from catalog.core.errors import DecodeFailure, EmptyOrMissingStore, IndexOutOfRange, StorageFailure
from catalog.schemas.items import Item

logger = logging.getLogger(__name__)

_items_adapter = TypeAdapter(list[Item])


class ItemRepository:
    """Items persisted as one JSON array in a single file.

    Every insert reads the whole document, appends and rewrites it. The
    rewrite is not atomic and there is no locking: two overlapping inserts
    both read the old list and the later write drops the earlier item.
    Ids are list positions and are only stable within one listing.
    """

    def __init__(self, items_file: str | Path):
        self.items_file = Path(items_file)

    def _read(self) -> list[Item]:
        try:
            raw = self.items_file.read_bytes()
        except FileNotFoundError as exc:
            raise EmptyOrMissingStore(f"no items stored yet: {self.items_file}") from exc
        except OSError as exc:
            raise StorageFailure(f"failed to read {self.items_file}: {exc}") from exc

        try:
            return _items_adapter.validate_python(json.loads(raw))
        except (UnicodeDecodeError, json.JSONDecodeError, PydanticValidationError) as exc:
            raise DecodeFailure(f"failed to decode {self.items_file}") from exc

    def _write(self, items: list[Item]) -> None:
        payload = json.dumps([it.model_dump() for it in items], ensure_ascii=False)
        try:
            self.items_file.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise StorageFailure(f"failed to write {self.items_file}: {exc}") from exc

    def insert(self, item: Item) -> None:
        try:
            items = self._read()
        except EmptyOrMissingStore:
            items = []

        items.append(item)
        self._write(items)
        logger.debug("Inserted item %r at position %d", item.name, len(items) - 1)

    def get_all(self) -> list[Item]:
        return self._read()

    def get_by_index(self, index: int) -> Item:
        items = self.get_all()
        if not 0 <= index < len(items):
            raise IndexOutOfRange(f"item {index} not found ({len(items)} items)")
        return items[index]
