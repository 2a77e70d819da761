"""Common Schemas — shapes shared by every resource router."""

from pydantic import BaseModel


class DeletedResponse(BaseModel):
    """Id of a record removed by a delete or cancel."""
    id: str
