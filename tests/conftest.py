from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import recommender...` works when pytest uses importlib import mode.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from recommender.engine import RecommendationEngine  # noqa: E402
from recommender.sample_data import SAMPLE_RATINGS, build_sample_store  # noqa: E402
from recommender.store import InMemoryRatingsStore  # noqa: E402


@pytest.fixture
def sample_store() -> InMemoryRatingsStore:
    return build_sample_store()


@pytest.fixture
def engine(sample_store: InMemoryRatingsStore) -> RecommendationEngine:
    return RecommendationEngine(sample_store)


@pytest.fixture
def sample_rows(db):
    from ratings.models import Rating

    Rating.objects.bulk_create(
        [
            Rating(user=user, item=item, score=score)
            for user, user_ratings in SAMPLE_RATINGS.items()
            for item, score in user_ratings.items()
        ]
    )
