"""Page/limit windowing for list queries.

Pages are 1-based. The offset is computed as ``(page - 1) * limit`` with no
bounds checking: a non-positive page produces a zero or negative offset and
the value is handed to the database unchanged.
"""

from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class Pagination:
    """A page request.

    Attributes:
        page: 1-based page number (default 1).
        limit: Page size (default 10, no upper bound).
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        """Number of rows to skip before the page starts."""
        return (self.page - 1) * self.limit

    def as_dict(self) -> dict[str, int]:
        return {"offset": self.offset, "limit": self.limit}


def get_pagination(page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> Pagination:
    """Build a pagination window.

    Args:
        page: 1-based page number.
        limit: Page size.

    Returns:
        Pagination exposing ``offset`` and ``limit``.
    """
    return Pagination(page=page, limit=limit)
