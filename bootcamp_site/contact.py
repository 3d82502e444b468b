import asyncio
import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .exceptions import ContactValidationError
from .models import ContactSubmission, MessageResponse

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MISSING_FIELDS_MESSAGE = "Please fill in all fields"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
THANK_YOU_MESSAGE = "Thank you for your message! We'll get back to you soon."


def parse_submission(payload: Any) -> ContactSubmission:
    """Build a submission from a decoded request body.

    Anything that is not a mapping of plain values counts as an empty form.
    """
    if not isinstance(payload, Mapping):
        raise ContactValidationError(MISSING_FIELDS_MESSAGE)
    try:
        return ContactSubmission.model_validate(dict(payload))
    except ValidationError:
        raise ContactValidationError(MISSING_FIELDS_MESSAGE)


def validate_submission(submission: ContactSubmission) -> None:
    if not (submission.name and submission.email and submission.message):
        raise ContactValidationError(MISSING_FIELDS_MESSAGE)
    if not EMAIL_PATTERN.fullmatch(submission.email):
        raise ContactValidationError(INVALID_EMAIL_MESSAGE)


async def handle_submission(payload: Any, delay: float) -> MessageResponse:
    submission = parse_submission(payload)
    validate_submission(submission)

    # Submissions are not stored anywhere; the log is the only record
    logger.info("New contact form submission received")
    logger.info(f"Contact details: {submission.model_dump()}")

    # Simulate processing time
    await asyncio.sleep(delay)
    return MessageResponse(success=True, message=THANK_YOU_MESSAGE)
