"""Entity Records — immutable snapshots of every stored entity, plus patches.

Invariants:
    - Records are frozen: a mutation produces a new record that replaces the old
      one in its collection, so anything holding the old record (an Order's
      customer snapshot) never observes later changes
    - A patch only carries fields explicitly set; UNSET fields are left untouched
    - merge() never changes a record's id

Design Decisions:
    - Frozen dataclasses over dicts: attribute typos fail loudly, equality is structural
    - UNSET sentinel instead of None: None is a legitimate value for optional fields
      (Product.description, Customer.address), so it cannot mean "not provided"
"""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any, Mapping, TypeVar

from storefront.core.domain_types import (
    ProductId, VariantId, CustomerId, SellerId, OrderId,
)
from storefront.core.errors import InvalidPatchError


class _Unset:
    """Marker for a patch field that was not provided."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Product:
    id: ProductId
    name: str
    price: int
    description: str | None = None


@dataclass(frozen=True)
class Variant:
    """Stock-keeping unit of a product. inventory_quantity may go negative."""
    id: VariantId
    product_id: ProductId
    color: str
    size: str
    inventory_quantity: int


@dataclass(frozen=True)
class Customer:
    id: CustomerId
    name: str
    email: str
    address: str | None = None


@dataclass(frozen=True)
class Seller:
    id: SellerId
    name: str
    email: str


@dataclass(frozen=True)
class OrderLine:
    """One ordered (product, variant, quantity) triple. References are not validated."""
    product_id: ProductId
    variant_id: VariantId
    quantity: int


@dataclass(frozen=True)
class Order:
    """Placed order. `customer` is the snapshot taken at creation time."""
    id: OrderId
    created_at: datetime
    customer: Customer
    lines: tuple[OrderLine, ...] = field(default_factory=tuple)


# ─── Patches ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Patch:
    """Base for partial-field value objects. Subclasses declare the updatable fields."""

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]):
        """Build a patch from a mapping holding only the provided fields."""
        known = {f.name for f in fields(cls)}
        for name in values:
            if name not in known:
                raise InvalidPatchError(name, cls.__name__.removesuffix("Patch"))
        return cls(**values)

    def provided(self) -> dict[str, Any]:
        """Fields explicitly set on this patch."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    @property
    def is_empty(self) -> bool:
        return not self.provided()


@dataclass(frozen=True)
class ProductPatch(Patch):
    name: str = UNSET
    description: str | None = UNSET
    price: int = UNSET


@dataclass(frozen=True)
class VariantPatch(Patch):
    color: str = UNSET
    size: str = UNSET
    inventory_quantity: int = UNSET


@dataclass(frozen=True)
class CustomerPatch(Patch):
    name: str = UNSET
    email: str = UNSET
    address: str | None = UNSET


R = TypeVar("R")


def merge(record: R, patch: Patch) -> R:
    """Shallow merge: copy each provided patch field over the record.

    Raises InvalidPatchError when the patch names a field the record lacks
    or tries to rewrite the id.
    """
    record_fields = {f.name for f in fields(record)}
    changes = patch.provided()
    for name in changes:
        if name == "id" or name not in record_fields:
            raise InvalidPatchError(name, type(record).__name__)
    if not changes:
        return record
    return replace(record, **changes)
