"""Domain Types — identity wrappers and entity kinds for the store.

Invariants:
    - Every id is an opaque decimal string, unique within its own collection
    - Ids of different kinds are distinct types even though all are str

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for EntityKind: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", str)
VariantId = NewType("VariantId", str)
CustomerId = NewType("CustomerId", str)
SellerId = NewType("SellerId", str)
OrderId = NewType("OrderId", str)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """The five collections owned by the store."""
    PRODUCT = "Product"
    VARIANT = "Variant"
    CUSTOMER = "Customer"
    SELLER = "Seller"
    ORDER = "Order"
