"""Small response shapes shared by resource endpoints."""

from pydantic import BaseModel


class DeleteResponse(BaseModel):
    success: bool = True
