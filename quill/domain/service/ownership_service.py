"""Ownership checks for mutating blog and comment operations."""

import logfire

from quill.domain.error import NotAuthorizedError, NotFoundError
from quill.domain.model.access import (
    AccessDecision,
    Forbidden,
    OwnedResource,
    Permitted,
    ResourceNotFound,
)
from quill.domain.repository import BlogRepository, CommentRepository
from quill.domain.value import ResourceKind, UserId

from .base import Service


class OwnershipGuard(Service):
    """Decides whether a subject may change a resource.

    Existence is checked before ownership, so callers can never learn
    whether someone else's resource exists by probing with a 403.
    """

    def __init__(
        self,
        blog_repository: BlogRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize ownership guard.

        Args:
            blog_repository: Blog repository
            comment_repository: Comment repository
        """
        self.blog_repository = blog_repository
        self.comment_repository = comment_repository

    async def _load(self, kind: ResourceKind, resource_id: int) -> OwnedResource | None:
        if kind is ResourceKind.BLOG:
            return await self.blog_repository.find_by_id(resource_id)
        return await self.comment_repository.find_by_id(resource_id)

    async def check(
        self, subject_id: UserId, kind: ResourceKind, resource_id: int
    ) -> AccessDecision:
        """Check whether ``subject_id`` owns a resource.

        Args:
            subject_id: Authenticated subject
            kind: Resource kind
            resource_id: Resource ID

        Returns:
            Permitted with the loaded resource, ResourceNotFound, or Forbidden
        """
        with logfire.span(
            "ownership_guard.check",
            subject_id=subject_id,
            kind=kind.value,
            resource_id=resource_id,
        ):
            resource = await self._load(kind, resource_id)

            if resource is None:
                return ResourceNotFound(kind=kind, resource_id=resource_id)

            if resource.owner_id != subject_id:
                logfire.warn(
                    "Ownership check failed",
                    subject_id=subject_id,
                    kind=kind.value,
                    resource_id=resource_id,
                    owner_id=resource.owner_id,
                )
                return Forbidden(kind=kind, resource_id=resource_id)

            return Permitted(kind=kind, resource=resource)

    async def authorize(
        self, subject_id: UserId, kind: ResourceKind, resource_id: int
    ) -> OwnedResource:
        """Load a resource the subject owns, or raise.

        Args:
            subject_id: Authenticated subject
            kind: Resource kind
            resource_id: Resource ID

        Returns:
            The loaded resource

        Raises:
            NotFoundError: If the resource does not exist
            NotAuthorizedError: If the subject is not the owner
        """
        decision = await self.check(subject_id, kind, resource_id)

        if isinstance(decision, ResourceNotFound):
            raise NotFoundError(kind.value.capitalize(), str(resource_id))
        if isinstance(decision, Forbidden):
            raise NotAuthorizedError(kind.value, str(resource_id), str(subject_id))

        return decision.resource
