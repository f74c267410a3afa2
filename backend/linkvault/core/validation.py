"""Submission Validation — pure checks for RVU emails, URLs and link submissions.

Invariants:
    - Email match is exact: no case folding, no trimming
    - URL parse failures return False, never raise
    - check_submission evaluates presence, then email, then URL; first failure wins

Design Decisions:
    - URL parsing delegated to pydantic's AnyUrl (WHATWG parser in pydantic-core)
"""

import re

from pydantic import AnyUrl, TypeAdapter, ValidationError

from linkvault.core.errors import LinkValidationError

RVU_EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@rvu\.edu\.in")

REQUIRED_FIELDS = ("title", "url", "description", "student_email")

MISSING_FIELDS_MESSAGE = "All fields are required"
INVALID_EMAIL_MESSAGE = "Please use a valid RVU email address (@rvu.edu.in)"
INVALID_URL_MESSAGE = "Invalid URL format"

_url_adapter = TypeAdapter(AnyUrl)


def is_rvu_email(value: str) -> bool:
    """True when value is a local part followed by the literal @rvu.edu.in domain."""
    return RVU_EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_url(value: str) -> bool:
    """True when value parses as an absolute URL."""
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def check_submission(
    title: str | None,
    url: str | None,
    description: str | None,
    student_email: str | None,
) -> None:
    """Raise LinkValidationError for the first failing check of a new link."""
    values = dict(
        title=title, url=url, description=description,
        student_email=student_email,
    )
    missing = [name for name in REQUIRED_FIELDS if not values[name]]
    if missing:
        raise LinkValidationError(MISSING_FIELDS_MESSAGE, missing[0])
    if not is_rvu_email(student_email):
        raise LinkValidationError(INVALID_EMAIL_MESSAGE, "studentEmail")
    if not is_valid_url(url):
        raise LinkValidationError(INVALID_URL_MESSAGE, "url")
