"""Shared pytest fixtures for restaurant entry tests."""

import json
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from restaurant_entry.config import Config

PLACEHOLDER_BYTES = b"\xff\xd8\xff\xe0placeholder"


def answer_with(answers: Iterable[str]) -> Callable[[str], str]:
    """Build a prompt function that replays ``answers`` in order."""
    pending = list(answers)
    asked: list[str] = []

    def prompt(question: str) -> str:
        asked.append(question)
        if not pending:
            raise EOFError(f"No answer left for: {question}")
        return pending.pop(0)

    prompt.asked = asked
    return prompt


def full_answers(**overrides: str) -> list[str]:
    """Answers for every prompt, in prompt order."""
    answers = {
        "name": "Crabby Bill's",
        "slug": "",
        "area_key": "fenwick-island",
        "address": "Fenwick Island, DE",
        "price": "",
        "cuisines": "Seafood, Crabs",
        "vibes": "Casual, Waterfront / View",
        "good_for": "Groups",
        "short_blurb": "Steamed crabs by the bay.",
        "long_blurb": "A local institution.",
        "must_try": "Crab cakes",
        "website": "https://crabbybills.example",
        "menu_url": "",
        "featured": "y",
    }
    answers.update(overrides)
    return list(answers.values())


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A minimal website tree with data files and a placeholder image."""
    data_dir = tmp_path / "src" / "data"
    data_dir.mkdir(parents=True)
    (data_dir / "restaurants.json").write_text(
        json.dumps(
            [
                {
                    "name": "Crabby Bill's",
                    "slug": "crabby-bills",
                    "areaKey": "fenwick-island",
                    "price": "$$",
                    "cuisines": ["Seafood"],
                    "photos": ["/images/restaurants/crabby-bills/1.jpg"],
                    "featured": False,
                }
            ],
            indent=2,
        )
        + "\n",
        encoding="utf-8",
    )
    (data_dir / "areas.json").write_text(
        json.dumps(
            [
                {"key": "fenwick-island", "name": "Fenwick Island"},
                {"key": "ocean-city", "name": "Ocean City"},
            ]
        ),
        encoding="utf-8",
    )
    (data_dir / "cuisines.json").write_text(
        json.dumps(["Seafood", "BBQ", "Pizza"]), encoding="utf-8"
    )

    images_dir = tmp_path / "public" / "images"
    images_dir.mkdir(parents=True)
    (images_dir / "placeholder.jpg").write_bytes(PLACEHOLDER_BYTES)
    return tmp_path


@pytest.fixture
def config(site_root: Path) -> Config:
    """Configuration pointing at the temporary site."""
    return Config(site_root=site_root)


@pytest.fixture
def make_prompt() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Factory for prompt functions that replay scripted answers."""
    return answer_with


@pytest.fixture
def answers() -> Callable[..., list[str]]:
    """Factory for a complete set of answers, with per-field overrides."""
    return full_answers


@pytest.fixture
def echoed() -> list[str]:
    """Collects the lines shown to the operator."""
    return []
