import csv
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Protocol, Union

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, float] = MappingProxyType({})


class RatingsLoadError(Exception):
    """Raised when ratings data cannot be loaded."""


class RatingsStore(Protocol):
    """
    Read contract the engines depend on.

    Anything that can list users and hand back one user's ratings
    (item_id -> rating) works: the in-memory store below, a snapshot of
    the Django ``Rating`` table, or a test fixture.
    """

    def get_all_users(self) -> List[str]:
        ...

    def get_user_ratings(self, user_id: str) -> Mapping[str, float]:
        ...

    def has_user(self, user_id: str) -> bool:
        ...


class InMemoryRatingsStore:
    """
    Stores user-item ratings.

    Internally:
        ratings[user_id][item_id] = rating (float)

    Readers get read-only views; only the store's own mutators change it.
    """

    def __init__(self) -> None:
        self.ratings: Dict[str, Dict[str, float]] = {}

    @classmethod
    def from_dict(
        cls, ratings: Mapping[str, Mapping[str, float]]
    ) -> "InMemoryRatingsStore":
        store = cls()
        for user_id, user_ratings in ratings.items():
            store.ensure_user(user_id)
            for item_id, rating in user_ratings.items():
                store.add_rating(user_id, item_id, rating)
        return store

    def ensure_user(self, user_id: str) -> None:
        if user_id not in self.ratings:
            self.ratings[user_id] = {}

    def add_rating(self, user_id: str, item_id: str, rating: float) -> None:
        self.ensure_user(user_id)
        self.ratings[user_id][item_id] = float(rating)

    def set_rating(self, user_id: str, item_id: str, rating: float) -> None:
        self.add_rating(user_id, item_id, rating)

    def remove_rating(self, user_id: str, item_id: str) -> None:
        self.ratings.get(user_id, {}).pop(item_id, None)

    def get_rating(self, user_id: str, item_id: str) -> float | None:
        return self.ratings.get(user_id, {}).get(item_id)

    def get_all_users(self) -> List[str]:
        return list(self.ratings.keys())

    def get_user_ratings(self, user_id: str) -> Mapping[str, float]:
        user_ratings = self.ratings.get(user_id)
        if user_ratings is None:
            return _EMPTY
        return MappingProxyType(user_ratings)

    def has_user(self, user_id: str) -> bool:
        return user_id in self.ratings

    def __len__(self) -> int:
        return len(self.ratings)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self.ratings


def load_ratings_csv(path: Union[str, Path]) -> InMemoryRatingsStore:
    """
    Load ``user,item,rating`` rows (with a header line) into a store.

    Blank lines are skipped. A row with the wrong number of fields or a
    non-numeric rating aborts the load.
    """
    path = Path(path)
    if not path.is_file():
        raise RatingsLoadError(f"Ratings file does not exist: {path}")

    store = InMemoryRatingsStore()

    with path.open("r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            raise RatingsLoadError(f"Ratings file is empty: {path}")

        header = [h.strip().lower() for h in header]
        if header != ["user", "item", "rating"]:
            raise RatingsLoadError(
                f"Ratings file {path} must start with a 'user,item,rating' header."
            )

        for line_no, row in enumerate(reader, start=2):
            if not row or all(not cell.strip() for cell in row):
                continue
            if len(row) != 3:
                raise RatingsLoadError(
                    f"Ratings file malformed at line {line_no}: expected 3 fields."
                )

            user_id, item_id, rating_s = (cell.strip() for cell in row)
            if not user_id or not item_id:
                raise RatingsLoadError(
                    f"Ratings file malformed at line {line_no}: empty field(s)."
                )
            try:
                rating = float(rating_s)
            except ValueError:
                raise RatingsLoadError(
                    f"Ratings file malformed at line {line_no}: rating is not numeric."
                ) from None

            store.add_rating(user_id, item_id, rating)

    logger.info(
        "Loaded ratings for %d users from %s", len(store), path
    )
    return store
