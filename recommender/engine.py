import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from recommender.similarity import euclidean_similarity
from recommender.store import RatingsStore

logger = logging.getLogger(__name__)


class QueryStatus(str, Enum):
    """Why a query result looks the way it does."""

    OK = "ok"
    USER_NOT_FOUND = "user_not_found"
    NO_SIMILAR_USERS = "no_similar_users"
    INVALID_COUNT = "invalid_count"


@dataclass(frozen=True)
class SimilarityResult:
    """
    Other users ranked against ``user_id``, most similar first.

    Only users with a positive score are listed. An empty result with
    status ``USER_NOT_FOUND`` means the user is unknown, which is not the
    same thing as a known user with no neighbours.
    """

    user_id: str
    status: QueryStatus
    neighbours: Tuple[Tuple[str, float], ...] = ()

    @property
    def found(self) -> bool:
        return self.status is not QueryStatus.USER_NOT_FOUND

    def as_dict(self) -> Dict[str, float]:
        return dict(self.neighbours)

    def __iter__(self) -> Iterator[Tuple[str, float]]:
        return iter(self.neighbours)

    def __len__(self) -> int:
        return len(self.neighbours)


@dataclass(frozen=True)
class RecommendationResult:
    """
    Items recommended for ``user_id``, best predicted rating first.

    ``scored`` keeps the predicted ratings for display; ``items`` is the
    ordered list of item ids.
    """

    user_id: str
    status: QueryStatus
    scored: Tuple[Tuple[str, float], ...] = ()

    @property
    def found(self) -> bool:
        return self.status is not QueryStatus.USER_NOT_FOUND

    @property
    def items(self) -> List[str]:
        return [item_id for item_id, _ in self.scored]

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.scored)


def _ranked(scores: Mapping[str, float]) -> List[Tuple[str, float]]:
    # highest score first, equal scores alphabetically by id
    return sorted(scores.items(), key=lambda x: (-x[1], x[0]))


class SimilarityEngine:
    """
    Scores how close users' rating vectors are.

    Uses Euclidean distance similarity, ``1 / (1 + d)``, over the items
    both users rated.
    """

    def __init__(self, ratings_store: RatingsStore) -> None:
        self.ratings_store = ratings_store

    @staticmethod
    def similarity(
        ratings_a: Optional[Mapping[str, float]],
        ratings_b: Optional[Mapping[str, float]],
    ) -> float:
        """
        Wraps the standalone similarity function.
        """
        return euclidean_similarity(ratings_a, ratings_b)

    def user_similarity(self, user1: str, user2: str) -> float:
        return self.similarity(
            self.ratings_store.get_user_ratings(user1),
            self.ratings_store.get_user_ratings(user2),
        )

    def rank_similar_users(self, target_user: str) -> SimilarityResult:
        """
        Similarity between target_user and every other user, highest first.

        Users sharing no rated item with target_user (score 0) are left out.
        """
        store = self.ratings_store

        if not store.has_user(target_user):
            logger.info("Target user '%s' not found.", target_user)
            return SimilarityResult(target_user, QueryStatus.USER_NOT_FOUND)

        target_ratings = store.get_user_ratings(target_user)
        similarities: Dict[str, float] = {}

        for other in store.get_all_users():
            if other == target_user:
                continue

            s = self.similarity(target_ratings, store.get_user_ratings(other))
            if s > 0:
                similarities[other] = s

        if not similarities:
            logger.info("No similar users found for '%s'.", target_user)
            return SimilarityResult(target_user, QueryStatus.NO_SIMILAR_USERS)

        neighbours = tuple(_ranked(similarities))
        logger.debug(
            "Ranked %d similar users for '%s'", len(neighbours), target_user
        )
        return SimilarityResult(target_user, QueryStatus.OK, neighbours)


class RecommendationEngine:
    """
    User-based collaborative filtering recommender.

    Predicted rating of an unrated item = similarity-weighted average of
    the ratings given to it by positively similar users.
    """

    def __init__(
        self,
        ratings_store: RatingsStore,
        similarity_engine: Optional[SimilarityEngine] = None,
    ) -> None:
        if (
            similarity_engine is not None
            and similarity_engine.ratings_store is not ratings_store
        ):
            raise ValueError(
                "similarity_engine must read the same ratings store as the recommender"
            )

        self.ratings_store = ratings_store
        self.similarity_engine = similarity_engine or SimilarityEngine(
            ratings_store
        )

    def rank_similar_users(self, target_user: str) -> SimilarityResult:
        return self.similarity_engine.rank_similar_users(target_user)

    def predict_ratings(self, similar_users: SimilarityResult) -> Dict[str, float]:
        """
        Predicted ratings for every item reachable through the neighbours
        in ``similar_users`` that the target user has not rated.
        """
        store = self.ratings_store
        target_ratings = store.get_user_ratings(similar_users.user_id)

        weighted_sums: Dict[str, float] = {}
        similarity_sums: Dict[str, float] = {}

        for neighbour_id, sim in similar_users:
            for item_id, rating in store.get_user_ratings(neighbour_id).items():
                # only items the target hasn't rated
                if item_id in target_ratings:
                    continue
                weighted_sums[item_id] = weighted_sums.get(item_id, 0.0) + rating * sim
                similarity_sums[item_id] = similarity_sums.get(item_id, 0.0) + sim

        return {
            item_id: weighted_sum / similarity_sums[item_id]
            for item_id, weighted_sum in weighted_sums.items()
            if similarity_sums[item_id] > 0
        }

    def recommend(self, target_user: str, max_results: int) -> RecommendationResult:
        """
        Recommend up to ``max_results`` unrated items for target_user.

        Never raises for bad input: an unknown user, no neighbours or a
        negative count all come back as an empty result with the matching
        ``QueryStatus``. A count of 0 is a valid, empty request.
        """
        if not self.ratings_store.has_user(target_user):
            logger.info("Target user '%s' not found.", target_user)
            return RecommendationResult(target_user, QueryStatus.USER_NOT_FOUND)

        if max_results < 0:
            logger.warning(
                "Negative recommendation count %d for '%s', treating as 0.",
                max_results,
                target_user,
            )
            return RecommendationResult(target_user, QueryStatus.INVALID_COUNT)

        if max_results == 0:
            return RecommendationResult(target_user, QueryStatus.OK)

        similar_users = self.rank_similar_users(target_user)
        if not similar_users:
            return RecommendationResult(target_user, similar_users.status)

        predicted = self.predict_ratings(similar_users)
        ranked = _ranked(predicted)[:max_results]

        logger.debug(
            "Predicted %d items for '%s' from %d neighbours, returning %d",
            len(predicted),
            target_user,
            len(similar_users),
            len(ranked),
        )
        return RecommendationResult(target_user, QueryStatus.OK, tuple(ranked))
