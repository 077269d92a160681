"""SQLAlchemy models for Curator.

All models inherit from the Base class defined in database.py and are
automatically created on application startup in development mode.
"""

from curator.infrastructure.persistence.models.collection import CollectionModel
from curator.infrastructure.persistence.models.collection_recommendation import (
    CollectionRecommendationModel,
)
from curator.infrastructure.persistence.models.recommendation import RecommendationModel
from curator.infrastructure.persistence.models.user import UserModel

__all__ = [
    "CollectionModel",
    "CollectionRecommendationModel",
    "RecommendationModel",
    "UserModel",
]
