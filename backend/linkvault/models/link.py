"""Link ORM — one submitted link per row.

Invariants:
    - id is a UUID primary key assigned on insert
    - created_at and owner_token are set once at creation and never updated
    - No uniqueness across title/url/student_email (duplicates allowed)

Design Decisions:
    - owner_token has no column default: the create handler resolves it
      explicitly before constructing the row
    - student_email indexed for lookup-by-email
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from linkvault.db.base import Base


class Link(Base):
    """A titled URL submitted by a student."""
    __tablename__ = "links"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    student_email: Mapped[str] = mapped_column(
        String(320), nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    owner_token: Mapped[str] = mapped_column(String(255), nullable=False)
