"""Link Routes — list, list-by-email, create and owner-gated delete.

Invariants:
    - Input checks run before any store call
    - Create checks run in order: presence, RVU email, URL; first failure wins
    - Delete checks run in order: token presence, record existence, token match
    - Store failures surface as StoreError (500) with a generic message

Design Decisions:
    - Owner token resolved by an explicit call before the record is built
    - Malformed ids are reported as unknown ids (404), not request errors
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkvault.core.errors import (
    AuthorizationError, LinkValidationError, ResourceNotFoundError,
)
from linkvault.core.repository_protocols import LinkRepository
from linkvault.core.tokens import resolve_owner_token
from linkvault.core.validation import check_submission, is_rvu_email
from linkvault.infrastructure.database import get_db
from linkvault.infrastructure.link_repository import DELETE_FAILED, SqlLinkRepository
from linkvault.schemas.link import (
    LinkCreate, LinkDelete, LinkResponse, MessageResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/links", tags=["links"])


def get_link_repository(db: AsyncSession = Depends(get_db)) -> LinkRepository:
    return SqlLinkRepository(db)


def _parse_link_id(link_id: str) -> UUID | None:
    try:
        return UUID(link_id)
    except ValueError:
        return None


@router.get("", response_model=list[LinkResponse])
async def list_links(repo: LinkRepository = Depends(get_link_repository)):
    """All links, newest first."""
    links = await repo.list_all()
    logger.info(f"Fetched {len(links)} links", extra={"count": len(links)})
    return links


@router.get("/email/{email}", response_model=list[LinkResponse])
async def list_links_by_email(
    email: str, repo: LinkRepository = Depends(get_link_repository),
):
    """Links submitted under one RVU email, newest first."""
    if not is_rvu_email(email):
        raise LinkValidationError("Invalid RVU email format", "email")
    links = await repo.list_by_email(email)
    logger.info(
        f"Fetched {len(links)} links by email",
        extra={"student_email": email, "count": len(links)},
    )
    return links


@router.post(
    "", response_model=LinkResponse, status_code=status.HTTP_201_CREATED,
)
async def create_link(
    body: LinkCreate, repo: LinkRepository = Depends(get_link_repository),
):
    """Store a new link and return it with its owner token."""
    check_submission(body.title, body.url, body.description, body.student_email)
    link = await repo.create(
        title=body.title,
        url=body.url,
        description=body.description,
        student_email=body.student_email,
        owner_token=resolve_owner_token(body.user_token),
    )
    logger.info(
        "Link created",
        extra={"link_id": link.id, "student_email": link.student_email},
    )
    return link


@router.delete("/{link_id}", response_model=MessageResponse)
async def delete_link(
    link_id: str,
    body: LinkDelete | None = None,
    repo: LinkRepository = Depends(get_link_repository),
):
    """Delete a link when the caller presents its owner token."""
    user_token = body.user_token if body else None
    logger.info("Delete requested", extra={"link_id": link_id})

    if not user_token:
        raise LinkValidationError("User token is required", "userToken")

    parsed_id = _parse_link_id(link_id)
    link = (
        await repo.get(parsed_id, failure_message=DELETE_FAILED)
        if parsed_id else None
    )
    if link is None:
        raise ResourceNotFoundError("Link not found", link_id)

    if link.owner_token != user_token:
        raise AuthorizationError("You can only delete your own links")

    await repo.delete(link)
    logger.info("Link deleted", extra={"link_id": link_id})
    return MessageResponse(message="Link deleted successfully")
