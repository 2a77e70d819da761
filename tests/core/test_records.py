"""Entity Records — immutability, patches and the shallow merge.

Tests cover:
    - merge() changes only provided fields
    - None is a real value for optional fields, distinct from UNSET
    - Empty patch returns the same record
    - Unknown fields and id rewrites are rejected
"""

import dataclasses

import pytest

from storefront.core.errors import InvalidPatchError
from storefront.core.records import (
    UNSET, Product, Variant, Customer,
    ProductPatch, VariantPatch, CustomerPatch, merge,
)


def _product(**overrides) -> Product:
    base = dict(id="1", name="Tee", price=100, description="Cotton")
    base.update(overrides)
    return Product(**base)


def test_records_are_frozen():
    product = _product()
    with pytest.raises(dataclasses.FrozenInstanceError):
        product.name = "Other"  # type: ignore[misc]


def test_merge_changes_only_provided_field():
    updated = merge(_product(), ProductPatch(price=250))
    assert updated == _product(price=250)


def test_merge_leaves_original_untouched():
    original = _product()
    merge(original, ProductPatch(name="Hoodie"))
    assert original.name == "Tee"


def test_merge_can_clear_optional_field_with_none():
    updated = merge(_product(), ProductPatch(description=None))
    assert updated.description is None
    assert updated.name == "Tee"


def test_empty_patch_returns_same_record():
    product = _product()
    assert ProductPatch().is_empty
    assert merge(product, ProductPatch()) is product


def test_patch_provided_skips_unset():
    patch = VariantPatch(inventory_quantity=0)
    assert patch.provided() == {"inventory_quantity": 0}
    assert patch.color is UNSET


def test_from_mapping_builds_patch():
    patch = CustomerPatch.from_mapping({"address": "1 Main St"})
    assert patch.provided() == {"address": "1 Main St"}


def test_from_mapping_rejects_unknown_field():
    with pytest.raises(InvalidPatchError) as exc_info:
        ProductPatch.from_mapping({"sku": "X-1"})
    assert exc_info.value.field == "sku"
    assert exc_info.value.http_status == 400


def test_merge_rejects_field_record_lacks():
    customer = Customer(id="1", name="Ada", email="ada@x.io")
    with pytest.raises(InvalidPatchError):
        merge(customer, VariantPatch(color="red"))


def test_variant_merge_keeps_parent_product():
    variant = Variant(id="4", product_id="2", color="red", size="M", inventory_quantity=5)
    updated = merge(variant, VariantPatch(size="L"))
    assert updated.product_id == "2"
    assert updated.size == "L"
    assert updated.inventory_quantity == 5
