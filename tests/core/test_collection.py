"""Entity Collection — CRUD contract for one entity kind.

Tests cover:
    - create assigns unique ids and returns the stored record
    - get/update/delete on absent ids return None (never raise)
    - delete removes visibility; a second delete also signals not-found
    - iteration follows creation order
"""

from storefront.core.collection import EntityCollection
from storefront.core.domain_types import EntityKind
from storefront.core.records import Product, ProductPatch


def _products_with(*names: str) -> EntityCollection[Product]:
    products = EntityCollection(EntityKind.PRODUCT)
    for name in names:
        products.create(lambda pid, name=name: Product(id=pid, name=name, price=10))
    return products


def test_create_returns_stored_record():
    products = EntityCollection(EntityKind.PRODUCT)
    created = products.create(lambda pid: Product(id=pid, name="Tee", price=10))
    assert products.get(created.id) == created
    assert created.id in products


def test_live_ids_are_unique():
    products = _products_with("a", "b", "c", "d")
    ids = [p.id for p in products]
    assert len(ids) == len(set(ids)) == 4


def test_get_absent_returns_none():
    assert _products_with().get("42") is None


def test_update_merges_patch():
    products = _products_with("Tee")
    updated = products.update("1", ProductPatch(price=99))
    assert updated.price == 99
    assert updated.name == "Tee"
    assert products.get("1") == updated


def test_update_absent_returns_none():
    products = _products_with("Tee")
    assert products.update("9", ProductPatch(price=1)) is None
    assert len(products) == 1


def test_delete_returns_id_then_not_found():
    products = _products_with("Tee")
    assert products.delete("1") == "1"
    assert products.get("1") is None
    assert products.delete("1") is None


def test_iteration_follows_creation_order():
    products = _products_with("a", "b", "c")
    products.delete("2")
    assert [p.name for p in products] == ["a", "c"]


def test_find_and_filter():
    products = _products_with("a", "b", "a")
    assert products.find(lambda p: p.name == "a").id == "1"
    assert products.find(lambda p: p.name == "z") is None
    assert [p.id for p in products.filter(lambda p: p.name == "a")] == ["1", "3"]
