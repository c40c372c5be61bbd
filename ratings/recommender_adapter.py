from typing import List

from recommender.engine import (
    RecommendationEngine,
    RecommendationResult,
    SimilarityResult,
)
from recommender.similarity import RatingsDict
from recommender.store import InMemoryRatingsStore

from .models import Rating


def build_ratings() -> RatingsDict:
    ratings: RatingsDict = {}

    for user, item, score in Rating.objects.values_list("user", "item", "score"):
        if user not in ratings:
            ratings[user] = {}
        ratings[user][item] = float(score)

    return ratings


def build_store() -> InMemoryRatingsStore:
    """
    Snapshot of the Rating table. Each query gets its own copy so the
    engine never sees rows change underneath it.
    """
    return InMemoryRatingsStore.from_dict(build_ratings())


def list_users() -> List[str]:
    return list(
        Rating.objects.order_by("user").values_list("user", flat=True).distinct()
    )


def get_similar_users(user_id: str) -> SimilarityResult:
    engine = RecommendationEngine(build_store())
    return engine.rank_similar_users(user_id)


def get_recommendations_for_user(
    user_id: str,
    max_results: int = 3,
) -> RecommendationResult:
    engine = RecommendationEngine(build_store())
    return engine.recommend(user_id, max_results)
