"""
Pydantic models for the string operations.

Both operations take ``{"s": "<text>"}``.  ``uppercase`` answers with
``{"v": "<TEXT>"}`` or, on a business failure, ``{"v": "", "err":
"<message>"}``; the ``err`` key is left out of the JSON when the call
succeeded.  ``count`` answers with ``{"v": <int>}``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UppercaseRequest(BaseModel):
    """Request body of the ``uppercase`` operation."""

    s: str = Field(..., examples=["hello"])


class UppercaseResponse(BaseModel):
    """Response body of the ``uppercase`` operation."""

    v: str = Field(..., examples=["HELLO"])
    err: Optional[str] = Field(None, description="Failure message, present only when the call failed")


class CountRequest(BaseModel):
    """Request body of the ``count`` operation."""

    s: str = Field(..., examples=["hello"])


class CountResponse(BaseModel):
    """Response body of the ``count`` operation."""

    v: int = Field(..., examples=[5])
