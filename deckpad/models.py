"""Slide data model — the three slide variants and their JSON shape."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar

logger = logging.getLogger(__name__)


@dataclass
class TitleSlide:
    type: ClassVar[str] = "title"

    title: str
    subtitle: str = ""


@dataclass
class ContentSlide:
    type: ClassVar[str] = "content"

    title: str
    content: str = ""
    points: list[str] = field(default_factory=list)


@dataclass
class ListSlide:
    type: ClassVar[str] = "list"

    title: str
    points: list[str] = field(default_factory=list)


Slide = TitleSlide | ContentSlide | ListSlide

SLIDE_TYPES = ("title", "content", "list")


def new_slide(kind: str) -> Slide:
    """Return the placeholder slide created by an "add" action for *kind*."""
    if kind == "title":
        return TitleSlide(title="New Title Slide", subtitle="Subtitle")
    if kind == "content":
        return ContentSlide(
            title="New Slide",
            content="Content",
            points=["Point 1", "Point 2"],
        )
    if kind == "list":
        return ListSlide(title="New Slide", points=["Point 1", "Point 2"])
    raise ValueError(f"Unknown slide type {kind!r}; expected one of {', '.join(SLIDE_TYPES)}")


def default_slides() -> list[Slide]:
    """The starter deck shown when nothing has been saved yet."""
    return [
        TitleSlide(
            title="Sample Title Slide",
            subtitle="With a subtitle\nMultiple lines possible",
        ),
        ContentSlide(
            title="Content Slide Example",
            content="This is the main content area where you can explain your key points.",
            points=[
                "First bullet point",
                "Second bullet point",
                "Third bullet point",
            ],
        ),
    ]


def slide_to_dict(slide: Slide) -> dict[str, Any]:
    if isinstance(slide, TitleSlide):
        return {"type": slide.type, "title": slide.title, "subtitle": slide.subtitle}
    if isinstance(slide, ContentSlide):
        return {
            "type": slide.type,
            "title": slide.title,
            "content": slide.content,
            "points": list(slide.points),
        }
    if isinstance(slide, ListSlide):
        return {"type": slide.type, "title": slide.title, "points": list(slide.points)}
    raise TypeError(f"Not a slide: {slide!r}")


def slide_from_dict(data: dict[str, Any]) -> Slide:
    """Build a slide from a JSON object, filling in whatever is missing.

    No schema is enforced.  Absent or null text fields become ``""``, other
    non-string values are converted with ``str``, and absent or null
    ``points`` become an empty list.  ``points`` that is not an array raises
    ``ValueError``.  Objects without a recognised ``type`` are read as
    content slides, which is how untyped slides have always been displayed.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Slide must be a JSON object, got {type(data).__name__}")

    kind = data.get("type")
    title = _text(data.get("title"))
    if kind == "title":
        return TitleSlide(title=title, subtitle=_text(data.get("subtitle")))
    points = _points(data.get("points"))
    if kind == "list":
        return ListSlide(title=title, points=points)
    if kind != "content":
        logger.debug("Slide without a known type (%r), reading as content", kind)
    return ContentSlide(title=title, content=_text(data.get("content")), points=points)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _points(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"Slide points must be a JSON array, got {type(value).__name__}")
    return [_text(p) for p in value]


def slides_to_json(slides: list[Slide]) -> str:
    """Serialize a slide sequence as a JSON array, indented by two spaces."""
    return json.dumps([slide_to_dict(s) for s in slides], indent=2, ensure_ascii=False)


def slides_from_json(text: str) -> list[Slide]:
    """Parse a JSON array of slide objects.

    Raises ``ValueError`` (``json.JSONDecodeError`` is a subclass) when the
    text is not JSON or is not an array.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"Presentation must be a JSON array, got {type(data).__name__}")
    return [slide_from_dict(item) for item in data]
