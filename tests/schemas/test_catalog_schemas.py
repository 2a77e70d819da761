"""Catalog Schemas — boundary validation and partial-update patches.

Tests cover:
    - Negative price and empty name rejected on create
    - Update schemas forward only the fields the client sent
    - Explicit null rejected for required fields, allowed for description
"""

import pytest
from pydantic import ValidationError

from storefront.schemas.catalog import (
    ProductCreate, ProductUpdate, VariantCreate, VariantUpdate,
)


def test_product_create_rejects_negative_price():
    with pytest.raises(ValidationError):
        ProductCreate(name="Tee", price=-1)


def test_product_create_rejects_empty_name():
    with pytest.raises(ValidationError):
        ProductCreate(name="", price=1)


def test_variant_create_allows_negative_stock():
    assert VariantCreate(color="red", size="M", inventory_quantity=-2).inventory_quantity == -2


def test_product_update_patch_has_only_sent_fields():
    patch = ProductUpdate.model_validate({"price": 5}).to_patch()
    assert patch.provided() == {"price": 5}


def test_product_update_can_clear_description():
    patch = ProductUpdate.model_validate({"description": None}).to_patch()
    assert patch.provided() == {"description": None}


def test_product_update_rejects_null_name():
    with pytest.raises(ValidationError):
        ProductUpdate.model_validate({"name": None})


def test_variant_update_rejects_null_stock():
    with pytest.raises(ValidationError):
        VariantUpdate.model_validate({"inventory_quantity": None})


def test_empty_update_gives_empty_patch():
    assert VariantUpdate.model_validate({}).to_patch().is_empty
