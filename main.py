import argparse
import logging
from pathlib import Path
from typing import Callable, List, Optional

from recommender.engine import RecommendationEngine
from recommender.sample_data import build_sample_store
from recommender.store import RatingsLoadError, RatingsStore, load_ratings_csv

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def setup_logging(level: int | str = "WARNING") -> None:
    """Configure stdlib logging with a consistent, project-wide format."""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def print_query(engine: RecommendationEngine, user_name: str, num_recs: int) -> None:
    print(f"\n--- Similar Users for {user_name} ---")
    similar_users = engine.rank_similar_users(user_name)
    if not similar_users:
        print("No similar users found.")
    else:
        for user, similarity in similar_users:
            print(f"- {user} (Similarity: {similarity:.4f})")

    print(f"\n--- Top {num_recs} Recommendations for {user_name} ---")
    recommendations = engine.recommend(user_name, num_recs)

    if not recommendations:
        print(f"No recommendations could be generated for {user_name}.")
    else:
        for i, item_id in enumerate(recommendations, start=1):
            print(f"{i}. {item_id}")


def run_shell(
    store: RatingsStore,
    input_func: Callable[[str], str] = input,
) -> None:
    engine = RecommendationEngine(store)

    print("Welcome to the Simple Recommendation System!")
    print(f"Available users: {', '.join(store.get_all_users())}")

    while True:
        try:
            user_name = input_func(
                f"\nEnter user name for recommendations (or '{EXIT_COMMAND}' to quit): "
            ).strip()
        except EOFError:
            break

        if user_name.lower() == EXIT_COMMAND:
            break

        if not store.has_user(user_name):
            print(f"User '{user_name}' not found in the system. Please try again.")
            continue

        try:
            num_recs = int(input_func("How many recommendations do you want? "))
        except ValueError:
            print("Invalid number. Please enter an integer.")
            continue
        except EOFError:
            break

        print_query(engine, user_name, num_recs)

    print("Exiting Recommendation System. Goodbye!")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="User-based collaborative filtering demo")
    p.add_argument("--user", type=str, default=None, help="Run one query for this user and exit")
    p.add_argument("--count", type=int, default=3, help="How many recommendations to return")
    p.add_argument(
        "--ratings-file",
        type=Path,
        default=None,
        help="CSV with user,item,rating rows; default is the built-in sample data",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.ratings_file is not None:
        try:
            store = load_ratings_csv(args.ratings_file)
        except RatingsLoadError as exc:
            logger.error("%s", exc)
            print(f"Could not load ratings: {exc}")
            return 1
    else:
        store = build_sample_store()

    if args.user is None:
        run_shell(store)
        return 0

    if not store.has_user(args.user):
        print(f"User '{args.user}' not found in the system.")
        return 1

    print_query(RecommendationEngine(store), args.user, args.count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
