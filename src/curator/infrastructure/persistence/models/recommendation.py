"""SQLAlchemy model for the recommendations table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from curator.infrastructure.persistence.database import Base
from curator.infrastructure.persistence.models.user import ID_TYPE


class RecommendationModel(Base):
    """A suggestion authored by a user.

    Attributes:
        id: Primary key.
        user_id: Owning user; only the owner may add it to a collection.
        title: Recommendation title.
        caption: Optional caption.
        category: Free-form category label.
        created_at: Timestamp when the recommendation was created.
    """

    __tablename__ = "recommendations"

    id: Mapped[int] = mapped_column(
        ID_TYPE,
        primary_key=True,
        comment="Recommendation ID",
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
    caption: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    category: Mapped[str] = mapped_column(
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
        back_populates="recommendations",
    )
    collection_recommendations: Mapped[list["CollectionRecommendationModel"]] = relationship(  # noqa: F821
        "CollectionRecommendationModel",
        back_populates="recommendation",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Recommendation(id={self.id}, title={self.title}, user_id={self.user_id})>"
