"""Catalog Schemas — products and variants at the API boundary.

Invariants:
    - ProductCreate.price is a non-negative integer, name is non-empty
    - Update models carry only the fields the client sent (exclude_unset)
    - Variant stock may be any integer, including negative corrections

Design Decisions:
    - to_patch() builds the core patch object here so routes stay one-liners
"""

from pydantic import BaseModel, Field, field_validator

from storefront.core.records import (
    Product, Variant, ProductPatch, VariantPatch,
)


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    price: int = Field(ge=0)


class ProductUpdate(BaseModel):
    """Partial product update — omitted fields are left untouched."""
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    price: int | None = Field(None, ge=0)

    @field_validator("name", "price")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v

    def to_patch(self) -> ProductPatch:
        return ProductPatch.from_mapping(self.model_dump(exclude_unset=True))


class VariantCreate(BaseModel):
    color: str = Field(min_length=1, max_length=100)
    size: str = Field(min_length=1, max_length=100)
    inventory_quantity: int


class VariantUpdate(BaseModel):
    """Partial variant update — omitted fields are left untouched."""
    color: str | None = Field(None, min_length=1, max_length=100)
    size: str | None = Field(None, min_length=1, max_length=100)
    inventory_quantity: int | None = None

    @field_validator("color", "size", "inventory_quantity")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v

    def to_patch(self) -> VariantPatch:
        return VariantPatch.from_mapping(self.model_dump(exclude_unset=True))


class VariantResponse(BaseModel):
    id: str
    product_id: str
    color: str
    size: str
    inventory_quantity: int

    @classmethod
    def from_record(cls, variant: Variant) -> "VariantResponse":
        return cls(
            id=variant.id,
            product_id=variant.product_id,
            color=variant.color,
            size=variant.size,
            inventory_quantity=variant.inventory_quantity,
        )


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None
    price: int
    variants: list[VariantResponse] = []

    @classmethod
    def from_record(
        cls, product: Product, variants: list[Variant] | None = None,
    ) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            variants=[VariantResponse.from_record(v) for v in variants or []],
        )
