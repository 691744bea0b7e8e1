"""Pydantic schema for API error responses."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Error response format for all API errors."""
    error: str = Field(
        ...,
        description="Human-readable error summary",
        examples=["Payment request failed"],
    )
    details: Any = Field(
        None,
        description="Provider error payload, or the transport error message",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "Payment request failed",
                    "details": {
                        "code": "PAYER_NOT_FOUND",
                        "message": "Payee does not exist",
                    },
                }
            ]
        }
    }
