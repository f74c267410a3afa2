"""Owner token generation for delete authorization.

Tokens look like ``user_<9 random base-36 chars><epoch millis in base 36>``.
Collisions are unlikely but nothing here is a security-grade secret.
"""

import secrets
import string
from datetime import datetime, timezone

TOKEN_PREFIX = "user_"
RANDOM_PART_LENGTH = 9

_BASE36 = string.digits + string.ascii_lowercase


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_owner_token(now: datetime | None = None) -> str:
    """Return a fresh owner token; `now` defaults to the current UTC time."""
    now = now or datetime.now(timezone.utc)
    random_part = "".join(
        secrets.choice(_BASE36) for _ in range(RANDOM_PART_LENGTH)
    )
    millis = int(now.timestamp() * 1000)
    return f"{TOKEN_PREFIX}{random_part}{to_base36(millis)}"


def resolve_owner_token(user_token: str | None, now: datetime | None = None) -> str:
    """Client-supplied token when non-empty, otherwise a generated one."""
    if user_token:
        return user_token
    return generate_owner_token(now)
