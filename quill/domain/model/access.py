"""Outcomes of the request authorization pipeline.

Each stage returns a value instead of raising: the identity stage yields
``Authenticated`` or ``Unauthenticated``; the ownership stage yields
``Permitted``, ``ResourceNotFound`` or ``Forbidden``. The HTTP layer turns
terminal outcomes into responses.
"""

from enum import Enum
from typing import Union

from quill.domain.model.blog import Blog
from quill.domain.model.comment import Comment
from quill.domain.model.common import DomainModel
from quill.domain.value import ResourceKind, UserId

OwnedResource = Union[Blog, Comment]


class UnauthenticatedReason(str, Enum):
    """Why a request carries no usable identity. Internal only."""

    MISSING = "missing"
    MALFORMED = "malformed"
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"


class Authenticated(DomainModel):
    """Request carries a valid credential for ``subject_id``."""

    subject_id: UserId


class Unauthenticated(DomainModel):
    """Request carries no valid credential."""

    reason: UnauthenticatedReason


class Permitted(DomainModel):
    """Subject owns the resource; ``resource`` is the loaded entity."""

    kind: ResourceKind
    resource: OwnedResource


class ResourceNotFound(DomainModel):
    """Target resource does not exist."""

    kind: ResourceKind
    resource_id: int


class Forbidden(DomainModel):
    """Resource exists but belongs to someone else."""

    kind: ResourceKind
    resource_id: int


AuthResult = Union[Authenticated, Unauthenticated]
AccessDecision = Union[Permitted, ResourceNotFound, Forbidden]
