"""Route Dependencies — store access and not-found mapping shared by routers.

Invariants:
    - The store is created once in create_app() and lives on app.state
    - found_or_404 is the only place a None from the store becomes an error
"""

from typing import TypeVar

from fastapi import Request

from storefront.core.domain_types import EntityKind
from storefront.core.errors import ErrorContext, ResourceNotFoundError
from storefront.core.store import CommerceStore

T = TypeVar("T")


def get_store(request: Request) -> CommerceStore:
    return request.app.state.store


def found_or_404(
    result: T | None, kind: EntityKind, entity_id: str, operation: str,
) -> T:
    """Return result, or raise ResourceNotFoundError when the store returned None."""
    if result is None:
        raise ResourceNotFoundError(
            kind.value, entity_id, ErrorContext(operation=operation),
        )
    return result
