# app/models/contact_messages.py
from sqlalchemy import Column, String, Text, Boolean, Enum, TIMESTAMP, Index
from app.database.database import Base
from datetime import datetime
import enum
import uuid


class MessageStatus(str, enum.Enum):
    new = "new"
    read = "read"
    replied = "replied"


def generate_message_id() -> str:
    return str(uuid.uuid4())


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(String(36), primary_key=True, default=generate_message_id)
    message = Column(Text, nullable=False)
    is_anonymous = Column(Boolean, nullable=False, default=True)
    name = Column(String(100), nullable=False, default="Anonymous")
    email = Column(String(100), nullable=True)
    timestamp = Column(TIMESTAMP, nullable=False, default=datetime.utcnow)
    ip = Column(String(45), nullable=True)
    status = Column(Enum(MessageStatus), nullable=False, default=MessageStatus.new)

    __table_args__ = (
        Index("ix_contact_messages_timestamp", "timestamp"),
    )
