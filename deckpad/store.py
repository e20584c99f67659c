"""Local persistence and JSON export/import of slide sequences."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .models import Slide, default_slides, slides_from_json, slides_to_json

logger = logging.getLogger(__name__)

STORAGE_KEY = "presentation-slides"
EXPORT_FILENAME = "presentation.json"


class SlideStore:
    """A directory of JSON values, one file per key.

    The slide sequence is kept under a single fixed key and rewritten in
    full on every save.
    """

    def __init__(self, root: Path, key: str = STORAGE_KEY) -> None:
        self.root = Path(root)
        self.key = key

    @property
    def path(self) -> Path:
        return self.root / f"{self.key}.json"

    def save(self, slides: list[Slide]) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        self.path.write_text(slides_to_json(slides), encoding="utf-8")
        logger.debug("Saved %d slide(s) to %s", len(slides), self.path)

    def load(self) -> list[Slide] | None:
        """Return the stored slides, or ``None`` if nothing is stored.

        Raises ``ValueError`` if the stored value cannot be parsed.
        """
        if not self.path.exists():
            return None
        text = self.path.read_text(encoding="utf-8")
        return slides_from_json(text)


def load_or_default(store: SlideStore) -> list[Slide]:
    """Read the stored deck once at startup, falling back to the starter deck.

    A stored value that is present but unreadable is treated like a missing
    one.
    """
    try:
        slides = store.load()
    except (OSError, ValueError) as exc:
        logger.warning("Stored slides at %s are unreadable (%s); using defaults", store.path, exc)
        return default_slides()
    if slides is None:
        logger.info("No stored slides at %s; using defaults", store.path)
        return default_slides()
    logger.info("Loaded %d slide(s) from %s", len(slides), store.path)
    return slides


@dataclass
class ImportResult:
    slides: list[Slide] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def export_slides(slides: list[Slide], path: Path | None = None) -> Path:
    """Write *slides* as pretty-printed JSON and return the file written.

    *path* defaults to ``presentation.json`` in the working directory; an
    existing directory gets a ``presentation.json`` inside it.
    """
    path = Path(path) if path is not None else Path(EXPORT_FILENAME)
    if path.is_dir():
        path = path / EXPORT_FILENAME
    path.write_text(slides_to_json(slides), encoding="utf-8")
    logger.info("Exported %d slide(s) to %s", len(slides), path)
    return path


def import_slides(path: Path) -> ImportResult:
    """Read a presentation JSON file.

    Never raises: a file that cannot be read or parsed yields a result with
    ``error`` set, and the caller keeps whatever it had.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
        slides = slides_from_json(text)
    except (OSError, ValueError) as exc:
        logger.error("Error loading %s: %s", path, exc)
        return ImportResult(error=f"{type(exc).__name__}: {exc}")
    logger.info("Imported %d slide(s) from %s", len(slides), path)
    return ImportResult(slides=slides)
