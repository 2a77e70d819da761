"""Inventory Adjuster — signed deltas against composite-matched variants.

Tests cover:
    - adjust() requires product_id AND variant_id to match the same variant
    - Unmatched adjustments are silent no-ops
    - Stock may go negative
    - apply_lines() reports only the adjustments that matched
"""

import pytest

from storefront.core.inventory import DECREMENT, INCREMENT
from storefront.core.records import OrderLine
from storefront.core.store import CommerceStore


@pytest.fixture
def store():
    store = CommerceStore()
    tee = store.create_product("Tee", 100)
    mug = store.create_product("Mug", 50)
    store.create_variant(tee.id, "red", "M", 10)    # variant 1
    store.create_variant(mug.id, "white", "-", 4)   # variant 2
    return store


def test_adjust_applies_delta(store):
    variant = store.inventory.adjust("1", "1", -3)
    assert variant.inventory_quantity == 7
    assert store.get_variant("1").inventory_quantity == 7


def test_adjust_requires_matching_product(store):
    assert store.inventory.adjust("2", "1", -3) is None
    assert store.get_variant("1").inventory_quantity == 10


def test_adjust_unknown_variant_is_noop(store):
    before = store.counts()
    assert store.inventory.adjust("1", "99", -3) is None
    assert store.counts() == before


def test_adjust_can_go_negative(store):
    assert store.inventory.adjust("2", "2", -6).inventory_quantity == -2


def test_apply_lines_reports_matched_only(store):
    lines = [
        OrderLine("1", "1", 2),
        OrderLine("9", "9", 5),
        OrderLine("2", "2", 1),
    ]
    applied = store.inventory.apply_lines(lines, DECREMENT)
    assert [(a.variant_id, a.delta, a.inventory_quantity) for a in applied] == [
        ("1", -2, 8),
        ("2", -1, 3),
    ]


def test_apply_lines_increment_inverts_decrement(store):
    lines = [OrderLine("1", "1", 2), OrderLine("1", "1", 3)]
    store.inventory.apply_lines(lines, DECREMENT)
    assert store.get_variant("1").inventory_quantity == 5
    store.inventory.apply_lines(lines, INCREMENT)
    assert store.get_variant("1").inventory_quantity == 10
