"""SQLAlchemy model for the users table.

Users author recommendations and curate collections. Deleting a user
removes both through ``ON DELETE CASCADE``.
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from curator.infrastructure.persistence.database import Base

# BIGINT keys; SQLite only auto-increments INTEGER PRIMARY KEY columns
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


class UserModel(Base):
    """SQLAlchemy model for the users table.

    Attributes:
        id: Primary key.
        fname: First name.
        sname: Surname.
        profile_picture: Optional profile picture URL.
        bio: Optional free-text biography.
        created_at: Timestamp when the user was created.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        ID_TYPE,
        primary_key=True,
        comment="User ID",
    )
    fname: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="First name",
    )
    sname: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Surname",
    )
    profile_picture: Mapped[str | None] = mapped_column(
        String(2048),
        nullable=True,
        comment="Profile picture URL",
    )
    bio: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )

    # Relationships
    recommendations: Mapped[list["RecommendationModel"]] = relationship(  # noqa: F821
        "RecommendationModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    collections: Mapped[list["CollectionModel"]] = relationship(  # noqa: F821
        "CollectionModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def full_name(self) -> str:
        return f"{self.fname} {self.sname}"

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name={self.full_name})>"
