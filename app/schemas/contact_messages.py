# app/schemas/contact_messages.py
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from app.models.contact_messages import MessageStatus


class ContactSubmission(BaseModel):
    """Raw contact form payload, checked by validate_submission before use."""
    message: Optional[str] = None
    is_anonymous: Optional[bool] = Field(default=None, alias="isAnonymous")
    name: Optional[str] = None
    email: Optional[str] = None

    model_config = {
        "populate_by_name": True
    }


class ContactMessageCreate(BaseModel):
    message: str
    is_anonymous: bool
    name: str
    email: Optional[str] = None


class StatusUpdate(BaseModel):
    status: MessageStatus


class ContactMessageOut(BaseModel):
    id: str
    message: str
    is_anonymous: bool = Field(alias="isAnonymous")
    name: str
    email: Optional[str] = None
    timestamp: datetime
    status: MessageStatus

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }


class SubmissionResponse(BaseModel):
    success: bool = True
    message: str
    id: str


class ContactMessageListResponse(BaseModel):
    success: bool = True
    data: List[ContactMessageOut]


class ContactMessageResponse(BaseModel):
    success: bool = True
    data: ContactMessageOut


class ErrorResponse(BaseModel):
    success: bool = False
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
