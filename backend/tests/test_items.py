import json
import tempfile
import threading
import unittest
from pathlib import Path
from unittest import mock

from catalog.core.errors import DecodeFailure, EmptyOrMissingStore, IndexOutOfRange, StorageFailure
from catalog.schemas.items import Item
from catalog.services.items import ItemRepository


def _item(name: str, category: str = "kitchen", image: str = "abc.jpg") -> Item:
    return Item(name=name, category=category, image=image)


class TestItemRepository(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.items_file = Path(self._tmp.name) / "items.json"
        self.repo = ItemRepository(self.items_file)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_round_trip(self) -> None:
        image = "d2f1" * 16 + ".jpg"
        self.repo.insert(Item(name="mug", category="kitchen", image=image))
        items = self.repo.get_all()
        self.assertEqual(items, [Item(name="mug", category="kitchen", image=image)])

    def test_document_is_a_plain_json_array(self) -> None:
        self.repo.insert(_item("mug"))
        self.repo.insert(_item("pan"))
        doc = json.loads(self.items_file.read_text(encoding="utf-8"))
        self.assertEqual(doc, [
            {"name": "mug", "category": "kitchen", "image": "abc.jpg"},
            {"name": "pan", "category": "kitchen", "image": "abc.jpg"},
        ])

    def test_insertion_order_is_preserved(self) -> None:
        names = ["mug", "pan", "kettle", "spoon", "fork"]
        for name in names:
            self.repo.insert(_item(name))
        self.assertEqual([it.name for it in self.repo.get_all()], names)

    def test_get_by_index(self) -> None:
        for name in ("mug", "pan", "kettle"):
            self.repo.insert(_item(name))
        listing = self.repo.get_all()
        for i, expected in enumerate(listing):
            self.assertEqual(self.repo.get_by_index(i), expected)

    def test_get_by_index_out_of_range(self) -> None:
        self.repo.insert(_item("mug"))
        for index in (-1, 1, 99):
            with self.subTest(index=index):
                with self.assertRaises(IndexOutOfRange):
                    self.repo.get_by_index(index)

    def test_missing_document(self) -> None:
        with self.assertRaises(EmptyOrMissingStore):
            self.repo.get_all()
        with self.assertRaises(EmptyOrMissingStore):
            self.repo.get_by_index(0)

    def test_corrupt_document(self) -> None:
        for content in ("", "{not json", '{"name": "mug"}', '[{"name": "mug"}]'):
            with self.subTest(content=content):
                self.items_file.write_text(content, encoding="utf-8")
                with self.assertRaises(DecodeFailure):
                    self.repo.get_all()

    def test_document_with_invalid_utf8(self) -> None:
        self.items_file.write_bytes(b"[\xff\xfe]")
        with self.assertRaises(DecodeFailure):
            self.repo.get_all()
        with self.assertRaises(DecodeFailure):
            self.repo.insert(_item("mug"))

    def test_unwritable_document_raises_storage_failure(self) -> None:
        repo = ItemRepository(Path(self._tmp.name) / "no-such-dir" / "items.json")
        with self.assertRaises(StorageFailure):
            repo.insert(_item("mug"))

    def test_document_path_is_a_directory(self) -> None:
        self.items_file.mkdir()
        with self.assertRaises(StorageFailure):
            self.repo.get_all()
        with self.assertRaises(StorageFailure):
            self.repo.insert(_item("mug"))

    def test_insert_does_not_overwrite_corrupt_document(self) -> None:
        self.items_file.write_text("{not json", encoding="utf-8")
        with self.assertRaises(DecodeFailure):
            self.repo.insert(_item("mug"))
        self.assertEqual(self.items_file.read_text(encoding="utf-8"), "{not json")

    def test_overlapping_inserts_lose_an_item(self) -> None:
        # Both writers finish reading the empty store before either writes.
        barrier = threading.Barrier(2)
        real_read = ItemRepository._read
        errors = []

        def read_then_wait(repo):
            try:
                return real_read(repo)
            finally:
                barrier.wait(timeout=5)

        def insert(name):
            try:
                ItemRepository(self.items_file).insert(_item(name))
            except Exception as exc:
                errors.append(exc)

        with mock.patch.object(ItemRepository, "_read", read_then_wait):
            threads = [threading.Thread(target=insert, args=(name,)) for name in ("mug", "pan")]
            for t in threads:
                t.start()
            for t in threads:
                t.join(timeout=10)

        self.assertEqual(errors, [])
        items = self.repo.get_all()
        self.assertEqual(len(items), 1)
        self.assertIn(items[0].name, {"mug", "pan"})


if __name__ == "__main__":
    unittest.main()
