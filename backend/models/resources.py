"""Response models for the hosting service API.

Documents themselves are schema-less and are returned as plain JSON objects;
only the acknowledgement and error payloads have a fixed shape.
"""

from pydantic import BaseModel


class CreatedResponse(BaseModel):
    """Acknowledgement for a newly inserted document."""

    message: str
    id: str


class UpdatedResponse(BaseModel):
    """Acknowledgement for a replace or partial update."""

    message: str
    modifiedCount: int


class DeletedResponse(BaseModel):
    """Acknowledgement for a delete."""

    message: str
    deletedCount: int


class ErrorResponse(BaseModel):
    """Body returned for every 4xx/5xx raised by the resource routes."""

    error: str
    details: str | None = None
