"""Error Hierarchy — envelope shape and status codes."""

from storefront.core.errors import (
    ErrorCategory, ErrorContext, InvalidPatchError, ResourceNotFoundError, StoreError,
)


def test_not_found_is_404_with_entity_context():
    err = ResourceNotFoundError("Order", "7", ErrorContext(operation="cancel"))
    assert isinstance(err, StoreError)
    assert err.http_status == 404
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Order '7' not found"
    assert body["context"] == {"entity": "Order", "entity_id": "7", "operation": "cancel"}


def test_invalid_patch_is_validation_error():
    err = InvalidPatchError("sku", "Product")
    assert err.http_status == 400
    assert err.to_response()["error"]["category"] == "validation"
