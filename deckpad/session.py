"""Editing session — the slide sequence, the current slide and presentation mode."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from .markdown import parse_markdown, serialize_markdown
from .models import ContentSlide, ListSlide, Slide, TitleSlide, new_slide
from .store import ImportResult, SlideStore, export_slides, import_slides, load_or_default

logger = logging.getLogger(__name__)

# Which form fields each slide type exposes.
_EDITABLE_FIELDS: dict[type, tuple[str, ...]] = {
    TitleSlide: ("title", "subtitle"),
    ContentSlide: ("title", "content", "points"),
    ListSlide: ("title", "points"),
}


def parse_points(value: str) -> list[str]:
    """Split a one-point-per-line text box into bullet points, dropping blank lines."""
    return [line for line in value.split("\n") if line.strip()]


class Session:
    """Owns the slide sequence for one run and persists it after each change."""

    def __init__(self, slides: list[Slide] | None = None, store: SlideStore | None = None) -> None:
        self.slides: list[Slide] = list(slides) if slides is not None else []
        self.store = store
        self.current = 0
        self.presenting = False

    @classmethod
    def open(cls, store: SlideStore) -> Session:
        return cls(load_or_default(store), store=store)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _changed(self) -> None:
        self._clamp()
        if self.store is None:
            return
        try:
            self.store.save(self.slides)
        except OSError as exc:
            logger.warning("Could not save slides to %s: %s", self.store.path, exc)

    def _clamp(self) -> None:
        last = max(0, len(self.slides) - 1)
        if self.current > last:
            self.current = last

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.slides):
            raise IndexError(f"Slide {index + 1} does not exist ({len(self.slides)} slide(s))")

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def add_slide(self, kind: str) -> int:
        self.slides.append(new_slide(kind))
        logger.info("Added %s slide at position %d", kind, len(self.slides))
        self._changed()
        return len(self.slides) - 1

    def update_slide(self, index: int, slide: Slide) -> None:
        self._check_index(index)
        self.slides[index] = slide
        self._changed()

    def set_field(self, index: int, field: str, value: str) -> None:
        """Apply a single form-field edit to the slide at *index*."""
        self._check_index(index)
        slide = self.slides[index]
        allowed = _EDITABLE_FIELDS.get(type(slide))
        if allowed is None:
            raise TypeError(f"Not a slide: {slide!r}")
        if field not in allowed:
            raise ValueError(
                f"{slide.type} slides have no {field!r} field (editable: {', '.join(allowed)})"
            )
        new_value = parse_points(value) if field == "points" else value
        self.update_slide(index, dataclasses.replace(slide, **{field: new_value}))

    def delete_slide(self, index: int) -> None:
        self._check_index(index)
        removed = self.slides.pop(index)
        logger.info("Deleted slide %d (%r)", index + 1, removed.title)
        self._changed()

    # ------------------------------------------------------------------
    # Markdown and files
    # ------------------------------------------------------------------

    def to_markdown(self) -> str:
        return serialize_markdown(self.slides)

    def apply_markdown(self, text: str) -> None:
        """Replace the whole deck with the slides parsed from *text*."""
        self.slides = parse_markdown(text)
        logger.info("Applied markdown: %d slide(s)", len(self.slides))
        self._changed()

    def import_file(self, path: Path) -> ImportResult:
        result = import_slides(path)
        if result.ok:
            self.slides = result.slides
            self._changed()
        return result

    def export_file(self, path: Path | None = None) -> Path:
        return export_slides(self.slides, path)

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    @property
    def current_slide(self) -> Slide | None:
        if not self.slides:
            return None
        return self.slides[self.current]

    def start_presenting(self, start: int = 0) -> None:
        if not self.slides:
            raise ValueError("Cannot present an empty deck")
        self.presenting = True
        self.go_to(start)

    def stop_presenting(self) -> None:
        self.presenting = False

    def go_to(self, index: int) -> None:
        self.current = min(max(index, 0), max(0, len(self.slides) - 1))

    def next_slide(self) -> None:
        if self.current < len(self.slides) - 1:
            self.current += 1

    def previous_slide(self) -> None:
        if self.current > 0:
            self.current -= 1

    def handle_key(self, key: str) -> None:
        """React to a key press while presenting; ignored otherwise."""
        if not self.presenting:
            return
        if key == "Escape":
            self.stop_presenting()
        elif key == "ArrowRight":
            self.next_slide()
        elif key == "ArrowLeft":
            self.previous_slide()
