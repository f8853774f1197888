# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

# render_lesson.py
"""
Render a lesson page JSON to Markdown and hand it to the delivery collaborators.

Usage:
    python render_lesson.py lesson.json
    python render_lesson.py lesson.json --message "week 3" --webhook-url https://...
    cat lesson.json | python render_lesson.py - --no-files --print

Steps:
    1. Read and parse the lesson JSON (file path or "-" for stdin)
    2. Render it to Markdown (no network, no disk)
    3. Write <id>.md, <id>-fragments.json and <id>-source.json (unless --no-files)
    4. Post the Markdown to the webhook when one is configured

Failures (unreadable input, invalid JSON, malformed lesson) exit with code 1
and, when a webhook is configured, are reported to it with a reason code.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from rich.console import Console

from lesson2md.config import RenderSettings, render_settings
from lesson2md.delivery import (
    REASON_INVALID_JSON,
    REASON_LESSON_PARSE_FAILED,
    DeliveryError,
    LessonFileManager,
    WebhookDelivery,
    lesson_identifier,
)
from lesson2md.rendering import (
    HtmlToMarkdownConverter,
    LessonDocument,
    LessonRenderError,
    render_lesson_fragments,
)

console = Console()

PREVIEW_CHARS = 1000


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _report_failure(
    delivery: WebhookDelivery | None, message: str, reason: str, preview: str
) -> None:
    if delivery is not None:
        delivery.report_failure(message, reason, html_preview=preview[:PREVIEW_CHARS])


def render_lesson(
    source: str,
    output_dir: Path,
    message: str = "",
    settings: RenderSettings = render_settings,
    write_files: bool = True,
    print_markdown: bool = False,
    delivery: WebhookDelivery | None = None,
) -> int:
    """
    Render one lesson and deliver it.

    Args:
        source: Path to the lesson JSON, or "-" for stdin
        output_dir: Directory for the output files
        message: Free-form message forwarded to the webhook
        settings: Rendering and delivery settings
        write_files: Write Markdown/fragments/source files
        print_markdown: Echo the Markdown to the console
        delivery: Webhook client; None disables webhook delivery

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    try:
        raw = _read_source(source)
    except UnicodeDecodeError as e:
        console.print(f"[red]❌ Lesson JSON is not valid UTF-8: {e}[/red]")
        preview = e.object.decode("utf-8", errors="replace")
        _report_failure(delivery, message, REASON_INVALID_JSON, preview)
        return 1
    except OSError as e:
        console.print(f"[red]❌ Could not read lesson JSON: {e}[/red]")
        return 1

    try:
        data: dict[str, Any] = json.loads(raw)
    except json.JSONDecodeError as e:
        console.print(f"[red]❌ Invalid lesson JSON: {e}[/red]")
        _report_failure(delivery, message, REASON_INVALID_JSON, raw)
        return 1

    try:
        document = LessonDocument.from_json(data)
        fragments = render_lesson_fragments(
            document, converter=HtmlToMarkdownConverter(), settings=settings
        )
    except LessonRenderError as e:
        console.print(f"[red]❌ Lesson parse failed: {e}[/red]")
        _report_failure(delivery, message, REASON_LESSON_PARSE_FAILED, raw)
        return 1

    markdown = "\n".join(fragment.markdown for fragment in fragments)
    console.print(
        f"[green]✓ Rendered '{document.title}' "
        f"({len(document.components)} components, {len(fragments)} fragments)[/green]"
    )

    if write_files:
        fallback = Path(source).stem if source != "-" else "lesson"
        manager = LessonFileManager(lesson_identifier(document.title, fallback), output_dir)
        md_path = manager.save_markdown(markdown)
        manager.save_fragments(fragments)
        manager.save_source(data)
        console.print(f"[green]✓ Markdown written: {md_path}[/green]")

    if print_markdown:
        # Exact document text, no console wrapping
        sys.stdout.write(markdown)

    if delivery is not None:
        try:
            delivery.deliver_markdown(markdown, message)
        except DeliveryError as e:
            console.print(f"[red]❌ Webhook delivery failed: {e}[/red]")
            return 1
        console.print("[green]✓ Delivered to webhook[/green]")

    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render a lesson page JSON to Markdown without any network fetch.",
    )
    parser.add_argument("lesson_json", help='Path to the lesson JSON ("-" reads stdin)')
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(render_settings.output_dir),
        help=f"Directory to write outputs (default: {render_settings.output_dir})",
    )
    parser.add_argument(
        "--message", default="", help="Free-form message forwarded with the delivery"
    )
    parser.add_argument(
        "--webhook-url",
        default=render_settings.webhook_url,
        help="Webhook endpoint (default: LESSON2MD_WEBHOOK_URL; empty disables delivery)",
    )
    parser.add_argument(
        "--no-files",
        dest="write_files",
        action="store_false",
        help="Skip writing Markdown/fragments/source files",
    )
    parser.set_defaults(write_files=True)
    parser.add_argument(
        "--print", dest="print_markdown", action="store_true", help="Print the Markdown"
    )
    args = parser.parse_args(argv)

    _configure_logging(render_settings.log_level)

    settings = replace(render_settings, webhook_url=args.webhook_url)
    delivery = WebhookDelivery.from_settings(settings) if settings.webhook_url else None

    try:
        return render_lesson(
            args.lesson_json,
            output_dir=args.output_dir,
            message=args.message,
            settings=settings,
            write_files=args.write_files,
            print_markdown=args.print_markdown,
            delivery=delivery,
        )
    finally:
        if delivery is not None:
            delivery.close()


if __name__ == "__main__":
    raise SystemExit(main())
