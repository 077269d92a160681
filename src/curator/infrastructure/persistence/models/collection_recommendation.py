"""SQLAlchemy model for the collection_recommendations junction table.

Implements the many-to-many relationship between collections and
recommendations. The composite primary key makes each pair unique.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from curator.infrastructure.persistence.database import Base
from curator.infrastructure.persistence.models.user import ID_TYPE


class CollectionRecommendationModel(Base):
    """Membership of a recommendation in a collection.

    Attributes:
        collection_id: Foreign key to collections table.
        recommendation_id: Foreign key to recommendations table.
        created_at: When the recommendation was added (insertion order).
        updated_at: Last modification time.
    """

    __tablename__ = "collection_recommendations"

    collection_id: Mapped[int] = mapped_column(
        ID_TYPE,
        ForeignKey("collections.id", ondelete="CASCADE"),
        primary_key=True,
        comment="Foreign key to collections table",
    )
    recommendation_id: Mapped[int] = mapped_column(
        ID_TYPE,
        ForeignKey("recommendations.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
        comment="Foreign key to recommendations table",
    )
    # Set in Python for sub-second precision; listings order on it
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.now,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    collection: Mapped["CollectionModel"] = relationship(  # noqa: F821
        "CollectionModel",
        back_populates="collection_recommendations",
    )
    recommendation: Mapped["RecommendationModel"] = relationship(  # noqa: F821
        "RecommendationModel",
        back_populates="collection_recommendations",
    )

    def __repr__(self) -> str:
        return (
            f"<CollectionRecommendation(collection_id={self.collection_id}, "
            f"recommendation_id={self.recommendation_id})>"
        )
