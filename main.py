#!/usr/bin/env python3
"""Fill a newspaper article template and auto-fit the body to its columns.

Usage:
    python main.py detect page.json --frame "Article"           # Show detected slots
    python main.py fill page.json article.json                    # Fill all slots, report overflow
    python main.py autofit page.json article.json                 # Fill + rewrite body until it fits
    python main.py autofit page.json article.json --dry-run       # Show column split, don't call API
    python main.py autofit page.json article.json --max-iterations 3
    python main.py save-key sk-ant-...                            # Store the Claude API key
"""

import argparse
import json
import sys
from pathlib import Path

from newsfit.config import MAX_ITERATIONS, OUTPUT_DIR
from newsfit.credentials import CredentialStore
from newsfit.document.host import DocumentHost
from newsfit.errors import NewsFitError
from newsfit.events import (
    ApiKeySaved,
    AutoFitComplete,
    ErrorEvent,
    FillComplete,
    IterationStarted,
    LayoutDetected,
)
from newsfit.layout import detect_layout, distribute, resolve_frame
from newsfit.loaders import find_nodes_by_name, load_article, load_document, save_document
from newsfit.pipeline import auto_fit, count_words, detect, fill_content, save_api_key
from newsfit.report import format_fit_report, format_layout_report


def print_event(event) -> None:
    """Print notifications the way the progress log reads."""
    if isinstance(event, IterationStarted):
        print(f"\n[iteration {event.iteration}]")
    elif isinstance(event, FillComplete):
        flag = "needs adjustment" if event.needs_adjustment else "fits"
        print(f"  OK Fill complete: overflow {event.overflow:+.1f} ({flag})")
    elif isinstance(event, AutoFitComplete):
        suffix = " (max iterations reached)" if event.max_reached else ""
        print(f"  OK Auto-fit complete after {event.iterations} iterations{suffix}")
    elif isinstance(event, LayoutDetected):
        print(f"  OK Layout detected: {event.column_count} body columns")
    elif isinstance(event, ApiKeySaved):
        print("  OK API key saved")
    elif isinstance(event, ErrorEvent):
        print(f"  Error: {event.message}")


def select(root, frame_name: str) -> list:
    """Selection for the run: frames named ``frame_name``, or the document root."""
    if not frame_name:
        return [root]
    return find_nodes_by_name(root, frame_name)


def positive_int(value: str) -> int:
    """argparse type: an integer of at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def output_path(document_path: Path, output: str) -> Path:
    if output:
        return Path(output)
    return OUTPUT_DIR / f"{document_path.stem}.fitted.json"


# ── Commands ──────────────────────────────────────────────────────────────


def cmd_detect(args) -> int:
    root = load_document(Path(args.document))
    selection = select(root, args.frame)
    layout = detect(selection, print_event)
    print(f"\n{format_layout_report(layout, selection[0].name)}")
    return 0


def cmd_fill(args) -> int:
    document_path = Path(args.document)
    root = load_document(document_path)
    content = load_article(Path(args.article))
    selection = select(root, args.frame)

    print("  Filling content...")
    fill_content(content, selection, DocumentHost(), print_event)

    out = output_path(document_path, args.output)
    save_document(root, out)
    print(f"  Saved to {out}")
    return 0


def cmd_autofit(args) -> int:
    document_path = Path(args.document)
    root = load_document(document_path)
    content = load_article(Path(args.article))
    selection = select(root, args.frame)
    frame = resolve_frame(selection)

    print(f"\n{'='*60}")
    print(f"Auto-fit: {frame.name} ({document_path})")
    print(f"{'='*60}")
    print(f"  → {count_words(content.body)} body words")

    if args.dry_run:
        layout = detect_layout(frame)
        print(f"\n{format_layout_report(layout, frame.name)}")
        if layout.columns:
            print("\n  [DRY RUN] Initial column split:")
            for i, text in enumerate(distribute(content.dateline, content.body, len(layout.columns)), 1):
                print(f"    Column {i}: {count_words(text)} words")
        return 0

    outcome = auto_fit(
        content,
        selection,
        DocumentHost(),
        CredentialStore(),
        print_event,
        max_iterations=args.max_iterations,
    )
    print(f"\n{format_fit_report(outcome, frame.name)}")

    out = output_path(document_path, args.output)
    save_document(root, out)
    print(f"  Saved to {out}")

    report_path = out.with_name(f"{out.stem}_report.json")
    with open(report_path, "w") as f:
        json.dump(outcome.to_dict(), f, indent=2)
    print(f"  Report saved to {report_path}")

    return 0 if outcome.error is None else 1


def cmd_save_key(args) -> int:
    save_api_key(args.api_key, CredentialStore(), print_event)
    return 0


def main():
    parser = argparse.ArgumentParser(description="Fill and auto-fit newspaper article templates")
    sub = parser.add_subparsers(dest="command", required=True)

    p_detect = sub.add_parser("detect", help="Show detected slots and body columns")
    p_detect.add_argument("document", help="Document JSON file")
    p_detect.add_argument("--frame", type=str, default="", help="Name of the article frame to select")
    p_detect.set_defaults(func=cmd_detect)

    for name, func, help_text in (
        ("fill", cmd_fill, "Fill slots and columns, report overflow"),
        ("autofit", cmd_autofit, "Fill columns and rewrite the body with Claude until it fits"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("document", help="Document JSON file")
        p.add_argument("article", help="Article JSON file (or plain-text body)")
        p.add_argument("--frame", type=str, default="", help="Name of the article frame to select")
        p.add_argument("--output", type=str, default="", help="Where to write the updated document")
        p.set_defaults(func=func)
        if name == "autofit":
            p.add_argument("--max-iterations", type=positive_int, default=MAX_ITERATIONS,
                           help="Upper bound on fill/measure cycles")
            p.add_argument("--dry-run", action="store_true", help="Show the column split without calling Claude API")

    p_key = sub.add_parser("save-key", help="Store the Claude API key")
    p_key.add_argument("api_key", help="Anthropic API key")
    p_key.set_defaults(func=cmd_save_key)

    args = parser.parse_args()

    try:
        sys.exit(args.func(args))
    except NewsFitError as e:
        print_event(ErrorEvent(message=str(e)))
        sys.exit(1)


if __name__ == "__main__":
    main()
