"""Plain-text slide rendering for the terminal presenter."""

from __future__ import annotations

import textwrap

from .models import ContentSlide, ListSlide, Slide, TitleSlide

BULLET = "•"


def render_slide(slide: Slide, width: int = 72) -> str:
    """Lay out *slide* as text.  Inline markdown is shown as written."""
    if isinstance(slide, TitleSlide):
        lines = [slide.title, ""]
        lines.extend(slide.subtitle.split("\n"))
        return "\n".join(lines)
    if isinstance(slide, ContentSlide):
        lines = [slide.title, ""]
        if slide.content:
            lines.append(textwrap.fill(slide.content, width=width))
            lines.append("")
        lines.extend(_bullet_lines(slide.points, width))
        return "\n".join(lines).rstrip("\n")
    if isinstance(slide, ListSlide):
        lines = [slide.title, ""]
        lines.extend(_bullet_lines(slide.points, width))
        return "\n".join(lines).rstrip("\n")
    raise TypeError(f"Not a slide: {slide!r}")


def _bullet_lines(points: list[str], width: int) -> list[str]:
    return [
        textwrap.fill(p, width=width, initial_indent=f"  {BULLET} ", subsequent_indent="    ")
        for p in points
    ]


def render_footer(index: int, total: int) -> str:
    return f"{index + 1} / {total}"
