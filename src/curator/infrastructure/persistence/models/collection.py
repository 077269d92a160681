"""SQLAlchemy model for the collections table.

A collection is a user-owned grouping of recommendations. Membership lives
in the collection_recommendations junction table.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from curator.infrastructure.persistence.database import Base
from curator.infrastructure.persistence.models.user import ID_TYPE


class CollectionModel(Base):
    """SQLAlchemy model for the collections table.

    Attributes:
        id: Primary key.
        user_id: Owning user.
        title: Collection title.
        created_at: Timestamp when the collection was created.
    """

    __tablename__ = "collections"

    id: Mapped[int] = mapped_column(
        ID_TYPE,
        primary_key=True,
        comment="Collection ID",
    )
    user_id: Mapped[int] = mapped_column(
        ID_TYPE,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Foreign key to users table (owner)",
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )

    # Relationships
    user: Mapped["UserModel"] = relationship(  # noqa: F821
        "UserModel",
        back_populates="collections",
    )
    collection_recommendations: Mapped[list["CollectionRecommendationModel"]] = relationship(  # noqa: F821
        "CollectionRecommendationModel",
        back_populates="collection",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CollectionRecommendationModel.created_at",
    )
    recommendations: Mapped[list["RecommendationModel"]] = relationship(  # noqa: F821
        "RecommendationModel",
        secondary="collection_recommendations",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Collection(id={self.id}, title={self.title}, user_id={self.user_id})>"
