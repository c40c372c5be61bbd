from typing import Dict

from recommender.store import InMemoryRatingsStore

# Eve is the "new user": she has only rated A and B.
SAMPLE_RATINGS: Dict[str, Dict[str, float]] = {
    "Alice": {"Item A": 5.0, "Item B": 3.0, "Item C": 4.0, "Item D": 4.0},
    "Bob": {
        "Item A": 3.0,
        "Item B": 1.0,
        "Item C": 2.0,
        "Item D": 3.0,
        "Item E": 4.0,
    },
    "Charlie": {"Item B": 4.0, "Item C": 5.0, "Item D": 5.0, "Item E": 3.0},
    "David": {"Item A": 4.0, "Item B": 3.0, "Item C": 4.0, "Item E": 5.0},
    "Eve": {"Item A": 4.0, "Item B": 5.0},
}


def build_sample_store() -> InMemoryRatingsStore:
    return InMemoryRatingsStore.from_dict(SAMPLE_RATINGS)
