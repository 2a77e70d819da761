"""Variant Routes — read, partial update and delete by variant id."""

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_store, found_or_404
from storefront.core.domain_types import EntityKind
from storefront.core.store import CommerceStore
from storefront.schemas.catalog import VariantUpdate, VariantResponse
from storefront.schemas.common import DeletedResponse

router = APIRouter(prefix="/variants", tags=["variants"])

VARIANT = EntityKind.VARIANT


@router.get("/{variant_id}", response_model=VariantResponse)
async def get_variant(variant_id: str, store: CommerceStore = Depends(get_store)):
    variant = found_or_404(store.get_variant(variant_id), VARIANT, variant_id, "get")
    return VariantResponse.from_record(variant)


@router.patch("/{variant_id}", response_model=VariantResponse)
async def update_variant(
    variant_id: str, body: VariantUpdate,
    store: CommerceStore = Depends(get_store),
):
    variant = found_or_404(
        store.update_variant(variant_id, body.to_patch()),
        VARIANT, variant_id, "update",
    )
    return VariantResponse.from_record(variant)


@router.delete("/{variant_id}", response_model=DeletedResponse)
async def delete_variant(variant_id: str, store: CommerceStore = Depends(get_store)):
    deleted = found_or_404(store.delete_variant(variant_id), VARIANT, variant_id, "delete")
    return DeletedResponse(id=deleted)
