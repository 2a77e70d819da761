"""Inventory Adjuster — signed stock deltas driven by order create/cancel.

Invariants:
    - adjust() touches at most one variant: the one matching product_id AND variant_id
    - Unmatched lines are skipped silently (no error surfaced to the order caller)
    - Cancellation applies the exact inverse of creation: same lines, same quantities
    - Stock is allowed to go negative (no availability check)

Design Decisions:
    - Returns the applied adjustments so callers can log/inspect without re-reading
    - Not locked here: the store holds its lock around a whole order's lines, so one
      order's read-modify-writes never interleave with another's
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable

from storefront.core.collection import EntityCollection
from storefront.core.records import OrderLine, Variant
from storefront.core.resolver import ReferentialResolver

logger = logging.getLogger(__name__)

DECREMENT = -1
INCREMENT = 1


@dataclass(frozen=True)
class InventoryAdjustment:
    """One applied delta: which variant, by how much, and the resulting stock."""
    variant_id: str
    delta: int
    inventory_quantity: int


@dataclass
class InventoryAdjuster:
    variants: EntityCollection[Variant]
    resolver: ReferentialResolver

    def adjust(self, product_id: str, variant_id: str, delta: int) -> Variant | None:
        """Add delta to the matching variant's stock. None if no variant matches."""
        variant = self.resolver.variant_for(product_id, variant_id)
        if variant is None:
            logger.debug(
                "No variant %s under product %s; skipping adjustment",
                variant_id, product_id,
                extra={"entity": "Variant", "entity_id": variant_id, "delta": delta},
            )
            return None
        return self.variants.replace(replace(
            variant, inventory_quantity=variant.inventory_quantity + delta,
        ))

    def apply_lines(
        self, lines: Iterable[OrderLine], sign: int,
    ) -> list[InventoryAdjustment]:
        """Apply sign * quantity for every line; returns the adjustments that matched."""
        applied = []
        for line in lines:
            delta = sign * line.quantity
            variant = self.adjust(line.product_id, line.variant_id, delta)
            if variant is not None:
                applied.append(InventoryAdjustment(
                    variant_id=variant.id,
                    delta=delta,
                    inventory_quantity=variant.inventory_quantity,
                ))
        return applied
