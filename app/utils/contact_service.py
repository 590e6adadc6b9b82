# app/utils/contact_service.py

from sqlalchemy.orm import Session, defer
from sqlalchemy.exc import SQLAlchemyError
from datetime import datetime
import logging
from typing import List, Optional

from fastapi import Depends

from app.database.database import get_db
from app.models.contact_messages import ContactMessage, MessageStatus
from app.schemas.contact_messages import ContactMessageCreate, ContactSubmission
from app.utils.validators import validate_submission

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 50


class ContactStoreError(Exception):
    """Raised when the underlying database fails"""
    pass


class ContactNotFoundError(Exception):
    """Raised when no contact message matches the given id"""
    pass


class ContactMessageStore:
    """Persistence for contact messages, bound to one database session"""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, data: ContactMessageCreate, ip: Optional[str] = None,
               timestamp: Optional[datetime] = None) -> ContactMessage:
        try:
            record = ContactMessage(
                message=data.message,
                is_anonymous=data.is_anonymous,
                name=data.name,
                email=data.email,
                ip=ip,
                timestamp=timestamp or datetime.utcnow(),
            )
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
            return record
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error saving contact message: {str(e)}")
            raise ContactStoreError(f"Database error: {str(e)}")

    def list_all(self) -> List[ContactMessage]:
        """Newest first, without loading the submitter's ip"""
        try:
            return (
                self.db.query(ContactMessage)
                .options(defer(ContactMessage.ip))
                .order_by(ContactMessage.timestamp.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching contact messages: {str(e)}")
            raise ContactStoreError(f"Database error: {str(e)}")

    def update_status(self, message_id: str, status: MessageStatus) -> Optional[ContactMessage]:
        try:
            record = self.db.query(ContactMessage).filter(ContactMessage.id == message_id).first()
            if not record:
                return None
            record.status = status
            self.db.commit()
            self.db.refresh(record)
            return record
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error updating contact message {message_id}: {str(e)}")
            raise ContactStoreError(f"Database error: {str(e)}")


def get_contact_store(db: Session = Depends(get_db)) -> ContactMessageStore:
    return ContactMessageStore(db)


def mask_email(email: Optional[str]) -> str:
    if not email:
        return "N/A"
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}"


def submit_contact_message(payload: ContactSubmission, ip: Optional[str],
                           store: ContactMessageStore) -> ContactMessage:
    """
    Validate a submission and persist it.
    Raises ContactValidationError before anything is written.
    """
    data = validate_submission(payload.message, payload.is_anonymous, payload.name, payload.email)
    record = store.insert(data, ip=ip, timestamp=datetime.utcnow())

    logger.info(
        "New message received: %s",
        {
            "id": record.id,
            "isAnonymous": record.is_anonymous,
            "name": record.name,
            "email": mask_email(record.email),
            "message": record.message[:PREVIEW_LENGTH] + "...",
            "timestamp": record.timestamp.isoformat(),
        },
    )
    return record


def update_message_status(message_id: str, status: MessageStatus,
                          store: ContactMessageStore) -> ContactMessage:
    record = store.update_status(message_id, status)
    if record is None:
        raise ContactNotFoundError(message_id)
    logger.info(f"Contact message {message_id} marked as {status.value}")
    return record
