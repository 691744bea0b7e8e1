"""Pydantic schema for the callback acknowledgement."""

from pydantic import BaseModel


class CallbackAcknowledgementSchema(BaseModel):
    message: str = "Callback received successfully"
