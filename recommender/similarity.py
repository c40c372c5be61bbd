import math
from typing import Dict, Mapping, Optional

# ratings[user_id][item_id] = numeric rating
RatingsDict = Dict[str, Dict[str, float]]


def euclidean_similarity(
    ratings_a: Optional[Mapping[str, float]],
    ratings_b: Optional[Mapping[str, float]],
) -> float:
    """
    Euclidean distance similarity between two users' ratings.

    Only considers items rated by BOTH users:

      d = sqrt(sum((a[i] - b[i]) ** 2))
      s = 1 / (1 + d)

    Identical overlapping ratings give 1.0. No overlap (or a missing /
    empty side) gives exactly 0.0.
    """
    if not ratings_a or not ratings_b:
        return 0.0

    # sorted so (a, b) and (b, a) add up in the same order
    common_items = sorted(set(ratings_a.keys()) & set(ratings_b.keys()))
    if not common_items:
        return 0.0

    sum_of_squares = sum(
        (ratings_a[i] - ratings_b[i]) ** 2 for i in common_items
    )
    distance = math.sqrt(sum_of_squares)

    return 1.0 / (1.0 + distance)
