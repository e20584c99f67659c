"""deckpad — Edit, convert and present slide decks from the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .models import SLIDE_TYPES
from .render import render_footer, render_slide
from .session import Session
from .store import EXPORT_FILENAME, SlideStore

logger = logging.getLogger(__name__)

DEFAULT_STORE_DIR = Path.home() / ".deckpad"

# Typed commands in the presenter and the key each stands for.
_PRESENTER_KEYS = {
    "": "ArrowRight",
    "n": "ArrowRight",
    "l": "ArrowRight",
    "p": "ArrowLeft",
    "h": "ArrowLeft",
    "q": "Escape",
    "esc": "Escape",
}


def _setup_logging(store_dir: Path, verbose: bool) -> None:
    """Log everything to ``deckpad.log`` in the store directory."""
    store_dir.mkdir(parents=True, exist_ok=True)
    root = logging.getLogger("deckpad")
    root.setLevel(logging.DEBUG)

    file_handler = logging.FileHandler(store_dir / "deckpad.log", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    root.addHandler(file_handler)

    if verbose:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(logging.INFO)
        console.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        root.addHandler(console)


def _slide_index(session: Session, number: int) -> int:
    """Turn a 1-based slide number from the command line into an index."""
    if not 1 <= number <= len(session.slides):
        print(f"Error: slide {number} does not exist ({len(session.slides)} slide(s)).",
              file=sys.stderr)
        sys.exit(1)
    return number - 1


def _cmd_show(session: Session, args: argparse.Namespace) -> None:
    if not session.slides:
        print("No slides.")
        return
    for i, slide in enumerate(session.slides, start=1):
        print(f"{i:3d}. [{slide.type}] {slide.title}")


def _cmd_add(session: Session, args: argparse.Namespace) -> None:
    index = session.add_slide(args.kind)
    print(f"Added {args.kind} slide {index + 1}.")


def _cmd_delete(session: Session, args: argparse.Namespace) -> None:
    index = _slide_index(session, args.number)
    session.delete_slide(index)
    print(f"Deleted slide {args.number}; {len(session.slides)} slide(s) left.")


def _cmd_set(session: Session, args: argparse.Namespace) -> None:
    index = _slide_index(session, args.number)
    try:
        session.set_field(index, args.field, args.value)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Updated {args.field} of slide {args.number}.")


def _cmd_markdown(session: Session, args: argparse.Namespace) -> None:
    if args.apply:
        md_path = Path(args.apply)
        if not md_path.exists():
            print(f"Error: {md_path} not found.", file=sys.stderr)
            sys.exit(1)
        try:
            text = md_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: could not read {md_path}: {exc}", file=sys.stderr)
            sys.exit(1)
        session.apply_markdown(text)
        print(f"Applied {md_path}: {len(session.slides)} slide(s).")
        return

    text = session.to_markdown()
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        print(f"Wrote markdown for {len(session.slides)} slide(s) to {args.output}")
    else:
        print(text)


def _cmd_export(session: Session, args: argparse.Namespace) -> None:
    path = session.export_file(Path(args.output) if args.output else None)
    print(f"Exported {len(session.slides)} slide(s) to {path}")


def _cmd_import(session: Session, args: argparse.Namespace) -> None:
    result = session.import_file(Path(args.file))
    if not result.ok:
        print(f"Error: could not load {args.file}: {result.error}", file=sys.stderr)
        sys.exit(1)
    print(f"Loaded {len(session.slides)} slide(s) from {args.file}")


def _cmd_present(session: Session, args: argparse.Namespace) -> None:
    try:
        session.start_presenting(args.start - 1)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    while session.presenting:
        print()
        print(render_slide(session.current_slide))
        print()
        print(render_footer(session.current, len(session.slides)))
        try:
            choice = input("  (n) next  (p) previous  (q) quit: ").strip().lower()
        except EOFError:
            choice = "q"
        key = _PRESENTER_KEYS.get(choice)
        if key is None:
            print(f"  Unknown command {choice!r}.")
            continue
        logger.debug("Presenter key %s on slide %d", key, session.current + 1)
        session.handle_key(key)


_COMMANDS = {
    "show": _cmd_show,
    "add": _cmd_add,
    "delete": _cmd_delete,
    "set": _cmd_set,
    "markdown": _cmd_markdown,
    "export": _cmd_export,
    "import": _cmd_import,
    "present": _cmd_present,
}


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="deckpad",
        description="Edit, convert and present slide decks from the terminal.",
    )
    parser.add_argument("--store-dir", default=None,
                        help=f"Where the deck and log are kept (default: {DEFAULT_STORE_DIR})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Echo log messages to stderr")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("show", help="List the slides")

    p_add = sub.add_parser("add", help="Append a new slide")
    p_add.add_argument("kind", choices=SLIDE_TYPES, help="Slide type")

    p_delete = sub.add_parser("delete", help="Delete a slide")
    p_delete.add_argument("number", type=int, help="Slide number (1-based)")

    p_set = sub.add_parser("set", help="Edit one field of a slide")
    p_set.add_argument("number", type=int, help="Slide number (1-based)")
    p_set.add_argument("field", choices=["title", "subtitle", "content", "points"],
                       help="Field to change; points take one bullet per line")
    p_set.add_argument("value", help="New value")

    p_md = sub.add_parser("markdown", help="Show the deck as markdown, or apply edited markdown")
    p_md.add_argument("--output", help="Write the markdown to this file instead of stdout")
    p_md.add_argument("--apply", metavar="FILE",
                      help="Replace the deck with the slides parsed from this markdown file")

    p_export = sub.add_parser("export", help="Export the deck as JSON")
    p_export.add_argument("--output",
                          help=f"Output file or directory (default: ./{EXPORT_FILENAME})")

    p_import = sub.add_parser("import", help="Replace the deck with a JSON file")
    p_import.add_argument("file", help="Presentation JSON file")

    p_present = sub.add_parser("present", help="Present the deck one slide at a time")
    p_present.add_argument("--start", type=int, default=1,
                           help="Slide number to start from (default: 1)")

    args = parser.parse_args()

    store_dir = Path(args.store_dir) if args.store_dir else DEFAULT_STORE_DIR
    _setup_logging(store_dir, args.verbose)
    logger.info("CLI arguments: %s", vars(args))

    session = Session.open(SlideStore(store_dir))
    try:
        _COMMANDS[args.command](session, args)
    except Exception:
        logger.exception("Command %s failed", args.command)
        raise


if __name__ == "__main__":
    main()
