"""Markdown converter — slide sequence to a flat markdown document and back."""

from __future__ import annotations

import logging
import re

from .models import ContentSlide, ListSlide, Slide, TitleSlide

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n---\n\n"

# A line that is exactly "---" (trailing spaces/tabs allowed).  The closing
# newline is not consumed, so back-to-back rules each split.
_SEPARATOR_RE = re.compile(r"\n---[ \t]*(?=\n)")

# "# Heading" but not "## Heading".
_H1_RE = re.compile(r"^#(?:\s+|$)")
_H2_RE = re.compile(r"^##(?:\s+|$)")

_BULLET_RE = re.compile(r"^-(?:\s+|$)")
_BULLETS_RE = re.compile(r"^(?:-(?:\s+|$))+")


def serialize_slide(slide: Slide) -> str:
    """Render a single slide as a markdown block (no separator)."""
    if isinstance(slide, TitleSlide):
        # Embedded newlines in the subtitle are written through unescaped.
        return f"# {slide.title}\n## {slide.subtitle}"
    if isinstance(slide, ListSlide):
        block = f"# {slide.title}"
        if slide.points:
            block += "\n\n" + _bullets(slide.points)
        return block
    if isinstance(slide, ContentSlide):
        block = f"# {slide.title}\n\n{slide.content}"
        if slide.points:
            block += "\n\n" + _bullets(slide.points)
        return block
    raise TypeError(f"Not a slide: {slide!r}")


def serialize_markdown(slides: list[Slide]) -> str:
    """Serialize *slides* into one markdown document, blocks separated by ``---``."""
    return SEPARATOR.join(serialize_slide(s) for s in slides)


def _bullets(points: list[str]) -> str:
    return "\n".join(f"- {p}" for p in points)


def parse_block(block: str) -> Slide | None:
    """Parse one slide block.  Returns ``None`` for a block with no text.

    A heading line followed directly by a ``##`` line is always a title
    slide, whatever comes after.  Otherwise the first line is the title, the
    lines before the first bullet are joined into the content paragraph and
    the bullets become points; a slide with bullets but no paragraph is a
    list slide.
    """
    lines = [line.strip() for line in block.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return None

    first = lines[0]
    if _H1_RE.match(first) and len(lines) > 1 and _H2_RE.match(lines[1]):
        if len(lines) > 2:
            logger.debug("Title slide %r: discarding %d trailing line(s)", first, len(lines) - 2)
        return TitleSlide(title=_H1_RE.sub("", first), subtitle=_H2_RE.sub("", lines[1]))

    title = _H1_RE.sub("", first)
    bullet_start = next(
        (i for i, line in enumerate(lines) if i > 0 and _BULLET_RE.match(line)),
        None,
    )
    if bullet_start is None:
        return ContentSlide(title=title, content=" ".join(lines[1:]), points=[])

    content = " ".join(lines[1:bullet_start])
    points = [_BULLETS_RE.sub("", line) for line in lines[bullet_start:]]
    if not content:
        return ListSlide(title=title, points=points)
    return ContentSlide(title=title, content=content, points=points)


def parse_markdown(text: str) -> list[Slide]:
    """Parse a markdown document into slides.

    The document is split on ``---`` lines.  Blocks without any text are
    dropped, so an empty or separator-only document yields ``[]``.  Parsing
    never raises.
    """
    text = text.replace("\r\n", "\n")
    # Pad with newlines so a rule on the first or last line still splits.
    parts = _SEPARATOR_RE.split(f"\n{text}\n")
    logger.debug("Parsing markdown: found %d block(s)", len(parts))

    slides: list[Slide] = []
    for i, part in enumerate(parts):
        slide = parse_block(part)
        if slide is None:
            logger.debug("  Block %d: empty, dropped", i + 1)
            continue
        logger.debug("  Block %d: %s slide %r", i + 1, slide.type, slide.title)
        slides.append(slide)
    return slides
