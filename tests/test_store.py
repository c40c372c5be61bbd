from __future__ import annotations

from pathlib import Path

import pytest

from recommender.store import InMemoryRatingsStore, RatingsLoadError, load_ratings_csv


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "ratings.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_add_and_read_ratings() -> None:
    store = InMemoryRatingsStore()
    store.add_rating("ann", "book", 4)
    store.set_rating("ann", "film", 2.5)

    assert store.has_user("ann")
    assert "ann" in store
    assert store.get_all_users() == ["ann"]
    assert dict(store.get_user_ratings("ann")) == {"book": 4.0, "film": 2.5}
    assert store.get_rating("ann", "book") == 4.0
    assert store.get_rating("ann", "missing") is None


def test_remove_rating_keeps_user() -> None:
    store = InMemoryRatingsStore.from_dict({"ann": {"book": 4.0}})
    store.remove_rating("ann", "book")
    store.remove_rating("nobody", "book")

    assert store.has_user("ann")
    assert dict(store.get_user_ratings("ann")) == {}


def test_user_ratings_are_read_only() -> None:
    store = InMemoryRatingsStore.from_dict({"ann": {"book": 4.0}})
    view = store.get_user_ratings("ann")

    with pytest.raises(TypeError):
        view["book"] = 1.0  # type: ignore[index]

    with pytest.raises(TypeError):
        store.get_user_ratings("nobody")["x"] = 1.0  # type: ignore[index]


def test_unknown_user_has_no_ratings() -> None:
    store = InMemoryRatingsStore()
    assert not store.has_user("ghost")
    assert len(store.get_user_ratings("ghost")) == 0


def test_load_ratings_csv(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "user,item,rating\nAlice,Item A,5\n\nAlice,Item B,3.5\nBob,Item A,2\n",
    )
    store = load_ratings_csv(path)

    assert store.get_all_users() == ["Alice", "Bob"]
    assert dict(store.get_user_ratings("Alice")) == {"Item A": 5.0, "Item B": 3.5}


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty"),
        ("who,what,score\nAlice,Item A,5\n", "header"),
        ("user,item,rating\nAlice,Item A\n", "line 2"),
        ("user,item,rating\nAlice,Item A,5\nBob,Item B,great\n", "line 3"),
        ("user,item,rating\n,Item A,5\n", "empty field"),
    ],
)
def test_load_ratings_csv_rejects_bad_files(tmp_path: Path, text: str, message: str) -> None:
    path = _write(tmp_path, text)
    with pytest.raises(RatingsLoadError, match=message):
        load_ratings_csv(path)


def test_load_ratings_csv_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RatingsLoadError, match="does not exist"):
        load_ratings_csv(tmp_path / "nope.csv")
