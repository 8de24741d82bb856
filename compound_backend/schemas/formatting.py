"""Pydantic schemas for the live input formatting endpoint."""

from typing import Optional

from pydantic import BaseModel, Field


class LiveInputRequest(BaseModel):
    text: str = Field("", description="Raw field contents after the keystroke.")
    cursor: Optional[int] = Field(
        None,
        description="Cursor offset in text; defaults to the end of the text.",
    )


class LiveInputResponse(BaseModel):
    text: str
    cursor: int = Field(..., ge=0)
