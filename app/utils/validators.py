# app/utils/validators.py
"""
Pure validation rules for contact form submissions.

Rules are checked in a fixed order and the first failure wins, so a client
always sees the most basic problem with its payload first.
"""
import re
from typing import Optional

from app.schemas.contact_messages import ContactMessageCreate

MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 2000
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
ANONYMOUS_NAME = "Anonymous"

# Same strings as \w+([.-]?\w+)*, with exactly one way to split each run of word characters
EMAIL_PATTERN = re.compile(r"\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*(?:\.\w{2,3})+", re.ASCII)


class ContactValidationError(Exception):
    """Raised when a submission breaks one of the validation rules"""
    pass


def is_valid_email(email: Optional[str]) -> bool:
    if not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_submission(
    message: Optional[str],
    is_anonymous: Optional[bool],
    name: Optional[str] = None,
    email: Optional[str] = None,
) -> ContactMessageCreate:
    """
    Check a submission and return its normalized form.
    A missing is_anonymous is treated as an attributed submission.
    """
    anonymous = bool(is_anonymous)
    text = (message or "").strip()

    if len(text) < MESSAGE_MIN_LENGTH:
        raise ContactValidationError(f"Message must be at least {MESSAGE_MIN_LENGTH} characters long")

    if not anonymous:
        sender = (name or "").strip()
        if len(sender) < NAME_MIN_LENGTH:
            raise ContactValidationError(f"Name must be at least {NAME_MIN_LENGTH} characters long")
        address = (email or "").strip()
        if len(address) > EMAIL_MAX_LENGTH:
            raise ContactValidationError(f"Email must be at most {EMAIL_MAX_LENGTH} characters long")
        if not is_valid_email(address):
            raise ContactValidationError("Please enter a valid email address")

    if len(text) > MESSAGE_MAX_LENGTH:
        raise ContactValidationError(f"Message must be at most {MESSAGE_MAX_LENGTH} characters long")

    if anonymous:
        return ContactMessageCreate(message=text, is_anonymous=True, name=ANONYMOUS_NAME, email=None)

    if len(sender) > NAME_MAX_LENGTH:
        raise ContactValidationError(f"Name must be at most {NAME_MAX_LENGTH} characters long")

    return ContactMessageCreate(
        message=text,
        is_anonymous=False,
        name=sender,
        email=address.lower(),
    )
