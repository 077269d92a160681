"""Persistence repositories for database operations."""

from curator.infrastructure.persistence.repositories.collection_recommendation_repository import (
    CollectionRecommendationRepository,
)
from curator.infrastructure.persistence.repositories.collection_repository import (
    CollectionRepository,
)
from curator.infrastructure.persistence.repositories.recommendation_repository import (
    RecommendationRepository,
)
from curator.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "CollectionRecommendationRepository",
    "CollectionRepository",
    "RecommendationRepository",
    "UserRepository",
]
