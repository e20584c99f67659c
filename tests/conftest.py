"""Shared fixtures for deckpad tests."""

from __future__ import annotations

import logging
import textwrap

import pytest

from deckpad.models import ContentSlide, ListSlide, TitleSlide
from deckpad.store import SlideStore


# ---------------------------------------------------------------------------
# Sample decks used across multiple test modules
# ---------------------------------------------------------------------------

MARKDOWN_DECK = textwrap.dedent("""\
    # Quarterly Review
    ## Finance team

    ---

    # Highlights

    Revenue grew *faster* than planned.

    - Margin up 3%
    - See [the report](https://example.com/q3)

    ---

    # Next Steps

    - Hire two engineers
    - Ship the _new_ dashboard
    """)


def well_formed_deck():
    return [
        TitleSlide(title="Quarterly Review", subtitle="Finance team"),
        ContentSlide(
            title="Highlights",
            content="Revenue grew *faster* than planned.",
            points=["Margin up 3%", "See [the report](https://example.com/q3)"],
        ),
        ListSlide(title="Next Steps", points=["Hire two engineers", "Ship the _new_ dashboard"]),
        ContentSlide(title="Summary", content="Nothing else to report.", points=[]),
    ]


@pytest.fixture
def deck():
    """A fresh well-formed deck covering all three slide types."""
    return well_formed_deck()


@pytest.fixture
def markdown_deck():
    """MARKDOWN_DECK as written by the serializer, plus a final newline."""
    return MARKDOWN_DECK


@pytest.fixture
def store(tmp_path):
    """A SlideStore rooted in a temp directory."""
    return SlideStore(tmp_path / "store")


@pytest.fixture(autouse=True)
def _reset_deckpad_logging():
    """Drop handlers the CLI attaches so tests don't leak log files."""
    yield
    root = logging.getLogger("deckpad")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
