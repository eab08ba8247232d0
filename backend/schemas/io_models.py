"""Pydantic models for the HTTP request/response bodies.

Field names on the wire are camelCase; Python attributes are snake_case.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class ChatRequest(BaseModel):
    message: str

class ChatResponse(BaseModel):
    response: str

class FeedbackRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_message: str = Field(..., alias="userMessage")
    bot_response: str = Field(..., alias="botResponse")
    rating: Optional[int] = Field(default=None, ge=1, le=5, description="Star rating (1 ~ 5)")
    comment: Optional[str] = None

class FeedbackResponse(BaseModel):
    message: str

class HealthResponse(BaseModel):
    status: str
