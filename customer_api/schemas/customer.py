"""Customer Schemas — Pydantic models for the customer resource at the API boundary.

Invariants:
    - Customer._id is the string form of the storage identifier, never an ObjectId
    - Customer.createdAt is an ISO-8601 string, never a BSON datetime
    - CustomerInput carries name only; createdAt is always server-assigned

Design Decisions:
    - Wire names (_id, createdAt) via aliases, snake_case attributes in Python
"""

from pydantic import BaseModel, ConfigDict, Field


class CustomerInput(BaseModel):
    """Write payload for create and update; fully replaces mutable fields."""
    name: str = Field(description="customer name")


class Customer(BaseModel):
    """Customer as returned to clients."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id", description="Document Id")
    name: str = Field(description="customer name")
    created_at: str = Field(alias="createdAt", description="createdAt")


class MessageResponse(BaseModel):
    """Plain message from the server."""
    message: str
