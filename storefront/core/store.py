"""Commerce Store — the facade owning all five collections and their consistency.

Invariants:
    - One store instance per process, passed explicitly to the boundary (no globals)
    - Every operation runs under the store lock: an order's inventory adjustments
      are one atomic unit relative to every other operation
    - Not-found is returned as None; no operation raises for a missing id
    - An order is created only for an existing customer; otherwise nothing changes
    - cancel_order restores exactly the quantities the order recorded, then erases it
    - Variants are created only under an existing product; deleting a product does
      not cascade (the relationship is checked at creation time only)

Design Decisions:
    - RLock held by the store itself: correct under a threaded host as well as a
      single event loop
    - Injectable clock so order timestamps are deterministic in tests
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Iterable

from storefront.core.collection import EntityCollection
from storefront.core.domain_types import (
    EntityKind, ProductId, VariantId, CustomerId, SellerId, OrderId,
)
from storefront.core.inventory import InventoryAdjuster, DECREMENT, INCREMENT
from storefront.core.records import (
    Product, Variant, Customer, Seller, Order, OrderLine,
    ProductPatch, VariantPatch,
)
from storefront.core.resolver import ReferentialResolver

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CommerceStore:
    """Products, variants, customers, sellers and orders held in memory."""

    def __init__(self, clock: Callable[[], datetime] = _utc_now):
        self.products: EntityCollection[Product] = EntityCollection(EntityKind.PRODUCT)
        self.variants: EntityCollection[Variant] = EntityCollection(EntityKind.VARIANT)
        self.customers: EntityCollection[Customer] = EntityCollection(EntityKind.CUSTOMER)
        self.sellers: EntityCollection[Seller] = EntityCollection(EntityKind.SELLER)
        self.orders: EntityCollection[Order] = EntityCollection(EntityKind.ORDER)
        self.resolver = ReferentialResolver(
            self.products, self.variants, self.customers, self.orders,
        )
        self.inventory = InventoryAdjuster(self.variants, self.resolver)
        self._clock = clock
        self._lock = threading.RLock()

    # ─── Products ────────────────────────────────────────────────

    def get_product(self, product_id: str) -> Product | None:
        with self._lock:
            return self._found(EntityKind.PRODUCT, product_id, self.products.get(product_id))

    def create_product(
        self, name: str, price: int, description: str | None = None,
    ) -> Product:
        with self._lock:
            product = self.products.create(lambda pid: Product(
                id=ProductId(pid), name=name, price=price, description=description,
            ))
            self._created(EntityKind.PRODUCT, product.id)
            return product

    def update_product(self, product_id: str, patch: ProductPatch) -> Product | None:
        with self._lock:
            product = self.products.update(product_id, patch)
            if product is not None:
                self._updated(EntityKind.PRODUCT, product_id, patch)
            return self._found(EntityKind.PRODUCT, product_id, product)

    def delete_product(self, product_id: str) -> str | None:
        with self._lock:
            return self._deleted(EntityKind.PRODUCT, product_id, self.products.delete(product_id))

    def variants_of(self, product_id: str) -> list[Variant] | None:
        """Variants created under the product, or None if the product is absent."""
        with self._lock:
            if self._found(EntityKind.PRODUCT, product_id, self.resolver.product(product_id)) is None:
                return None
            return self.resolver.variants_of(product_id)

    # ─── Variants ────────────────────────────────────────────────

    def get_variant(self, variant_id: str) -> Variant | None:
        with self._lock:
            return self._found(EntityKind.VARIANT, variant_id, self.variants.get(variant_id))

    def create_variant(
        self, product_id: str, color: str, size: str, inventory_quantity: int,
    ) -> Variant | None:
        """New variant under an existing product. None if the product is absent."""
        with self._lock:
            if self._found(EntityKind.PRODUCT, product_id, self.resolver.product(product_id)) is None:
                return None
            variant = self.variants.create(lambda vid: Variant(
                id=VariantId(vid),
                product_id=ProductId(product_id),
                color=color,
                size=size,
                inventory_quantity=inventory_quantity,
            ))
            self._created(EntityKind.VARIANT, variant.id)
            return variant

    def update_variant(self, variant_id: str, patch: VariantPatch) -> Variant | None:
        with self._lock:
            variant = self.variants.update(variant_id, patch)
            if variant is not None:
                self._updated(EntityKind.VARIANT, variant_id, patch)
            return self._found(EntityKind.VARIANT, variant_id, variant)

    def delete_variant(self, variant_id: str) -> str | None:
        with self._lock:
            return self._deleted(EntityKind.VARIANT, variant_id, self.variants.delete(variant_id))

    # ─── Customers & Sellers ─────────────────────────────────────

    def get_customer(self, customer_id: str) -> Customer | None:
        with self._lock:
            return self._found(EntityKind.CUSTOMER, customer_id, self.customers.get(customer_id))

    def add_customer(self, name: str, email: str, address: str | None = None) -> Customer:
        with self._lock:
            customer = self.customers.create(lambda cid: Customer(
                id=CustomerId(cid), name=name, email=email, address=address,
            ))
            self._created(EntityKind.CUSTOMER, customer.id)
            return customer

    def orders_of(self, customer_id: str) -> list[Order] | None:
        """Active orders placed by the customer, or None if the customer is absent."""
        with self._lock:
            if self._found(EntityKind.CUSTOMER, customer_id, self.resolver.customer(customer_id)) is None:
                return None
            return self.resolver.orders_of(customer_id)

    def get_seller(self, seller_id: str) -> Seller | None:
        with self._lock:
            return self._found(EntityKind.SELLER, seller_id, self.sellers.get(seller_id))

    def add_seller(self, name: str, email: str) -> Seller:
        with self._lock:
            seller = self.sellers.create(lambda sid: Seller(
                id=SellerId(sid), name=name, email=email,
            ))
            self._created(EntityKind.SELLER, seller.id)
            return seller

    # ─── Orders ──────────────────────────────────────────────────

    def get_order(self, order_id: str) -> Order | None:
        with self._lock:
            return self._found(EntityKind.ORDER, order_id, self.orders.get(order_id))

    def create_order(self, customer_id: str, lines: Iterable[OrderLine]) -> Order | None:
        """Place an order and take its quantities out of stock.

        Returns None (and touches no inventory) when the customer is absent.
        Lines whose product/variant pair does not resolve are kept on the order
        with no stock effect.
        """
        with self._lock:
            customer = self.resolver.customer(customer_id)
            if self._found(EntityKind.CUSTOMER, customer_id, customer) is None:
                return None
            order_lines = tuple(lines)
            order = self.orders.create(lambda oid: Order(
                id=OrderId(oid),
                created_at=self._clock(),
                customer=customer,
                lines=order_lines,
            ))
            applied = self.inventory.apply_lines(order.lines, DECREMENT)
            logger.info(
                "Order %s created with %d line(s), %d adjusted",
                order.id, len(order.lines), len(applied),
                extra={"entity": EntityKind.ORDER.value, "entity_id": order.id,
                       "operation": "create"},
            )
            return order

    def cancel_order(self, order_id: str) -> str | None:
        """Put the order's quantities back in stock and erase the order."""
        with self._lock:
            order = self.resolver.order(order_id)
            if self._found(EntityKind.ORDER, order_id, order) is None:
                return None
            self.orders.delete(order_id)
            applied = self.inventory.apply_lines(order.lines, INCREMENT)
            logger.info(
                "Order %s cancelled, %d line(s) restocked", order_id, len(applied),
                extra={"entity": EntityKind.ORDER.value, "entity_id": order_id,
                       "operation": "cancel"},
            )
            return order_id

    # ─── Introspection ───────────────────────────────────────────

    def counts(self) -> dict[str, int]:
        """Live record count per collection."""
        with self._lock:
            return {
                EntityKind.PRODUCT.value: len(self.products),
                EntityKind.VARIANT.value: len(self.variants),
                EntityKind.CUSTOMER.value: len(self.customers),
                EntityKind.SELLER.value: len(self.sellers),
                EntityKind.ORDER.value: len(self.orders),
            }

    # ─── Logging helpers ─────────────────────────────────────────

    @staticmethod
    def _found(kind: EntityKind, record_id: str, record):
        if record is None:
            logger.debug(
                "%s %s not found", kind.value, record_id,
                extra={"entity": kind.value, "entity_id": record_id},
            )
        return record

    @staticmethod
    def _created(kind: EntityKind, record_id: str) -> None:
        logger.info(
            "%s %s created", kind.value, record_id,
            extra={"entity": kind.value, "entity_id": record_id, "operation": "create"},
        )

    @staticmethod
    def _updated(kind: EntityKind, record_id: str, patch) -> None:
        logger.info(
            "%s %s updated (%s)", kind.value, record_id, ", ".join(patch.provided()),
            extra={"entity": kind.value, "entity_id": record_id, "operation": "update"},
        )

    @classmethod
    def _deleted(cls, kind: EntityKind, record_id: str, deleted: str | None) -> str | None:
        if deleted is not None:
            logger.info(
                "%s %s deleted", kind.value, record_id,
                extra={"entity": kind.value, "entity_id": record_id, "operation": "delete"},
            )
        return cls._found(kind, record_id, deleted)
