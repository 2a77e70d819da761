"""Referential Resolver — foreign-key lookups across collections.

Invariants:
    - Dangling references resolve to None, never raise
    - Variant resolution matches product_id AND variant_id on the same record

Design Decisions:
    - Composite variant match: a variant id alone is not trusted to identify stock
      under a different product
"""

from dataclasses import dataclass

from storefront.core.collection import EntityCollection
from storefront.core.records import Product, Variant, Customer, Order


@dataclass
class ReferentialResolver:
    """Resolves references against the store's collections."""

    products: EntityCollection[Product]
    variants: EntityCollection[Variant]
    customers: EntityCollection[Customer]
    orders: EntityCollection[Order]

    def product(self, product_id: str) -> Product | None:
        return self.products.get(product_id)

    def customer(self, customer_id: str) -> Customer | None:
        return self.customers.get(customer_id)

    def order(self, order_id: str) -> Order | None:
        return self.orders.get(order_id)

    def variant_for(self, product_id: str, variant_id: str) -> Variant | None:
        """The variant whose id and parent product id both match."""
        variant = self.variants.get(variant_id)
        if variant is None or variant.product_id != product_id:
            return None
        return variant

    def variants_of(self, product_id: str) -> list[Variant]:
        return self.variants.filter(lambda v: v.product_id == product_id)

    def orders_of(self, customer_id: str) -> list[Order]:
        return self.orders.filter(lambda o: o.customer.id == customer_id)
