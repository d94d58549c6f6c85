"""Pydantic request/response schemas for the Inventory API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from stockroom.domain.model.attribute import Attribute

# --- Request Schemas ---


class ItemRequest(BaseModel):
    """An item to create or upsert.

    Required fields default to empty/zero so the domain reports which one
    is missing instead of a generic schema error.
    """

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "code": "M4N5-F0C3-F4GK-SI00",
                    "name": "Tomato",
                    "price": 3.35,
                    "quantity": 12,
                    "attributes": ["organic", "locally-sourced"],
                }
            ]
        }
    }

    code: str = Field("", max_length=64)
    name: str = Field("", max_length=255)
    price: float = Field(0, ge=0)
    quantity: int = Field(0, ge=0)
    attributes: set[Attribute] = Field(default_factory=set)


class UpdateItemInfoRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"attributes": ["organic"], "price": 2.49}]
        }
    }

    attributes: set[Attribute] = Field(default_factory=set)
    price: float = Field(..., gt=0)


class QuantityIncreaseRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"code": "E5T6-9UI3-TH15-QR88", "delta": 10}]
        }
    }

    code: str = Field(..., max_length=64)
    delta: int = Field(..., gt=0)


# --- Response Schemas ---


class ItemResponse(BaseModel):
    code: str
    name: str
    attributes: list[str]
    price: float
    quantity: int


class ErrorResponse(BaseModel):
    error: str
    detail: str
