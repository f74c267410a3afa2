"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - All store IO accessed through Protocol types
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID


class LinkLike(Protocol):
    """Structural contract for a persisted link record."""
    id: UUID
    title: str
    url: str
    description: str
    student_email: str
    created_at: datetime
    owner_token: str


class LinkRepository(Protocol):
    """Contract for link persistence — implemented by the shell."""
    async def list_all(self) -> list[LinkLike]: ...
    async def list_by_email(self, student_email: str) -> list[LinkLike]: ...
    async def create(
        self, *, title: str, url: str, description: str,
        student_email: str, owner_token: str,
    ) -> LinkLike: ...
    async def get(
        self, link_id: UUID, failure_message: str = ...,
    ) -> LinkLike | None: ...
    async def delete(self, link: LinkLike) -> None: ...
