# app/routers/contact_messages.py
from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.security import limiter
from app.schemas.contact_messages import (
    ContactMessageListResponse,
    ContactMessageOut,
    ContactMessageResponse,
    ContactSubmission,
    ErrorResponse,
    StatusUpdate,
    SubmissionResponse,
)
from app.utils.contact_service import (
    ContactMessageStore,
    get_contact_store,
    submit_contact_message,
    update_message_status,
)

router = APIRouter()

error_responses = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

# Anyone can post a contact message, anonymously or not
@router.post("", response_model=SubmissionResponse, responses=error_responses)
@limiter.limit(settings.CONTACT_RATE_LIMIT)
def submit_contact(
    request: Request,
    payload: ContactSubmission,
    store: ContactMessageStore = Depends(get_contact_store),
):
    ip = request.client.host if request.client else None
    record = submit_contact_message(payload, ip, store)
    return {
        "success": True,
        "message": "Message sent successfully",
        "id": record.id,
    }

# No auth here, access control belongs to the gateway in front of the service
@router.get("", response_model=ContactMessageListResponse, responses={500: {"model": ErrorResponse}})
def get_all_messages(store: ContactMessageStore = Depends(get_contact_store)):
    messages = store.list_all()
    return {
        "success": True,
        "data": [ContactMessageOut.model_validate(m) for m in messages],
    }


@router.patch(
    "/{message_id}/status",
    response_model=ContactMessageResponse,
    responses={404: {"model": ErrorResponse}, **error_responses},
)
def update_status(
    message_id: str,
    data: StatusUpdate,
    store: ContactMessageStore = Depends(get_contact_store),
):
    record = update_message_status(message_id, data.status, store)
    return {
        "success": True,
        "data": ContactMessageOut.model_validate(record),
    }
