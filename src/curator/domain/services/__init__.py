"""Domain services for Curator.

Services contain business logic that doesn't naturally fit within a single
repository.
"""

from curator.domain.services.membership_service import (
    MembershipConflictError,
    MembershipError,
    MembershipForbiddenError,
    MembershipNotFoundError,
    MembershipService,
)

__all__ = [
    "MembershipConflictError",
    "MembershipError",
    "MembershipForbiddenError",
    "MembershipNotFoundError",
    "MembershipService",
]
