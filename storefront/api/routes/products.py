"""Product Routes — product CRUD plus the variants created under a product.

Invariants:
    - PATCH merges only the fields sent; DELETE does not cascade to variants
    - Creating a variant under an unknown product returns 404 and creates nothing
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import get_store, found_or_404
from storefront.core.domain_types import EntityKind
from storefront.core.store import CommerceStore
from storefront.schemas.catalog import (
    ProductCreate, ProductUpdate, ProductResponse,
    VariantCreate, VariantResponse,
)
from storefront.schemas.common import DeletedResponse

router = APIRouter(prefix="/products", tags=["products"])

PRODUCT = EntityKind.PRODUCT


def _with_variants(store: CommerceStore, product) -> ProductResponse:
    return ProductResponse.from_record(product, store.variants_of(product.id))


@router.post(
    "", response_model=ProductResponse, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate, store: CommerceStore = Depends(get_store),
):
    product = store.create_product(
        name=body.name, price=body.price, description=body.description,
    )
    return ProductResponse.from_record(product)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, store: CommerceStore = Depends(get_store)):
    product = found_or_404(store.get_product(product_id), PRODUCT, product_id, "get")
    return _with_variants(store, product)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: ProductUpdate,
    store: CommerceStore = Depends(get_store),
):
    product = found_or_404(
        store.update_product(product_id, body.to_patch()),
        PRODUCT, product_id, "update",
    )
    return _with_variants(store, product)


@router.delete("/{product_id}", response_model=DeletedResponse)
async def delete_product(product_id: str, store: CommerceStore = Depends(get_store)):
    deleted = found_or_404(store.delete_product(product_id), PRODUCT, product_id, "delete")
    return DeletedResponse(id=deleted)


@router.post(
    "/{product_id}/variants", response_model=VariantResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_variant(
    product_id: str, body: VariantCreate,
    store: CommerceStore = Depends(get_store),
):
    variant = found_or_404(
        store.create_variant(
            product_id, body.color, body.size, body.inventory_quantity,
        ),
        PRODUCT, product_id, "create_variant",
    )
    return VariantResponse.from_record(variant)


@router.get("/{product_id}/variants", response_model=list[VariantResponse])
async def list_variants(product_id: str, store: CommerceStore = Depends(get_store)):
    variants = found_or_404(store.variants_of(product_id), PRODUCT, product_id, "list_variants")
    return [VariantResponse.from_record(v) for v in variants]
