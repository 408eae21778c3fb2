"""
==============================================================================
Product Store Tests
==============================================================================

Tests for seeding, id assignment and mutations of ProductStore.

==============================================================================
"""

import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from product_catalog.catalog.store import ProductStore

from conftest import make_product


SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "products.json"


class TestStoreLoading:
    """Tests for loading seed documents."""

    def test_load_bundled_seed(self):
        store = ProductStore.from_file(SEED_FILE)
        assert len(store) == 3
        assert store.find(1).name == "Alpha Pass"

    def test_load_bare_list(self, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([{"id": 7, "name": "Solo"}]), encoding="utf-8")
        store = ProductStore.from_file(path)
        assert [p.id for p in store.all()] == [7]

    def test_load_replaces_contents(self, store: ProductStore, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps({"products": [{"id": 10, "name": "Only"}]}), encoding="utf-8")
        assert store.load(path) == 1
        assert [p.id for p in store.all()] == [10]

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            ProductStore.from_file(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{broken", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            ProductStore.from_file(path)


class TestStoreMutations:
    """Tests for add, replace and remove."""

    def test_all_returns_snapshot(self, store: ProductStore):
        snapshot = store.all()
        snapshot.clear()
        assert len(store) == 3

    def test_add_uses_running_maximum(self):
        store = ProductStore([make_product(5, "Five"), make_product(2, "Two")])
        assert store.add({"name": "Next"}).id == 6

    def test_add_to_empty_store(self):
        store = ProductStore()
        assert store.next_id() == 1
        assert store.add({"name": "First"}).id == 1

    def test_add_after_negative_ids(self):
        store = ProductStore([make_product(-4, "Odd")])
        assert store.add({"name": "First"}).id == 1

    def test_ids_stay_greater_after_delete(self, store: ProductStore):
        store.remove(3)
        assert store.add({"name": "Again"}).id == 3
        assert store.add({"name": "More"}).id == 4

    def test_replace_keeps_id_and_order(self, store: ProductStore):
        updated = store.replace(2, {"id": 9, "name": "Beta Prime"})
        assert updated.id == 2
        assert [p.name for p in store.all()] == ["Alpha Pass", "Beta Prime", "Gamma Gift Card"]

    def test_replace_missing(self, store: ProductStore):
        assert store.replace(42, {"name": "Nope"}) is None

    def test_remove_exactly_one(self, store: ProductStore):
        removed = store.remove(1)
        assert removed.name == "Alpha Pass"
        assert store.find(1) is None
        assert len(store) == 2

    def test_find_none(self, store: ProductStore):
        assert store.find(None) is None

    def test_concurrent_adds_get_unique_ids(self, store: ProductStore):
        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(lambda n: store.add({"name": f"Item {n}"}), range(100)))

        ids = [p.id for p in created]
        assert len(set(ids)) == 100
        assert sorted(ids) == list(range(4, 104))
