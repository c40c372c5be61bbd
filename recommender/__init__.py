from recommender.engine import (
    QueryStatus,
    RecommendationEngine,
    RecommendationResult,
    SimilarityEngine,
    SimilarityResult,
)
from recommender.similarity import euclidean_similarity
from recommender.store import (
    InMemoryRatingsStore,
    RatingsLoadError,
    RatingsStore,
    load_ratings_csv,
)

__all__ = [
    "InMemoryRatingsStore",
    "QueryStatus",
    "RatingsLoadError",
    "RatingsStore",
    "RecommendationEngine",
    "RecommendationResult",
    "SimilarityEngine",
    "SimilarityResult",
    "euclidean_similarity",
    "load_ratings_csv",
]
