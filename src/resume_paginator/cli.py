from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from resume_paginator.config import load_layout_config
from resume_paginator.models.document import InvalidDocumentError
from resume_paginator.services.document_loader import load_document_file
from resume_paginator.services.pagination import export_resume_pdf, paginate
from resume_paginator.templates import DEFAULT_TEMPLATE, list_templates
from resume_paginator.tui_rendering import render_page_summary
from resume_paginator.utils.export import ExportError, export_to_json, resume_filename


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-paginator",
        description="Split a resume into fixed-size pages for preview and export.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each placement decision")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("document", type=Path, help="Resume document (JSON)")
        p.add_argument(
            "--template",
            default=DEFAULT_TEMPLATE,
            choices=list_templates(),
            help="Page template used for measuring and drawing",
        )

    add_common(sub.add_parser("paginate", help="Print how blocks are assigned to pages"))

    export = sub.add_parser("export", help="Write every page to a PDF")
    add_common(export)
    export.add_argument("-o", "--output", type=Path, help="Output PDF path")

    json_export = sub.add_parser("json", help="Write the document with plain-text descriptions")
    json_export.add_argument("document", type=Path, help="Resume document (JSON)")
    json_export.add_argument("-o", "--output", type=Path, help="Output JSON path")

    preview = sub.add_parser("preview", help="Browse pages interactively")
    preview.add_argument("document", type=Path, help="Resume document (JSON)")

    return parser


def _same_file(a: Path, b: Path) -> bool:
    return a.resolve() == b.resolve()


def _default_output(document_path: Path, title: str | None, extension: str) -> Path:
    """Output next to the input, never the input itself."""
    output = document_path.with_name(resume_filename(title, extension))
    if _same_file(output, document_path):
        output = output.with_name(f"{output.stem}_export.{extension}")
    return output


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Run one CLI command.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = load_layout_config()
    except ValueError as exc:
        print(f"❌ Invalid layout configuration: {exc}")
        return 1

    if args.command == "preview":
        from resume_paginator.tui import main as tui_main

        tui_main(args.document, config)
        return 0

    try:
        document = load_document_file(args.document)
    except InvalidDocumentError as exc:
        print(f"❌ Error: {exc}")
        return 1

    if args.command == "paginate":
        pages = paginate(document, config, template_name=args.template)
        print(render_page_summary(pages, config.safe_content_height))
        return 0

    if args.command == "json":
        output = args.output or _default_output(args.document, document.get("title"), "json")
        if _same_file(output, args.document):
            print(f"❌ Refusing to overwrite the input document: {output}")
            return 1
        export_to_json(document, output)
        print(f"✅ JSON exported: {output}")
        return 0

    output = args.output or _default_output(args.document, document.get("title"), "pdf")
    if output.suffix.lower() != ".pdf":
        output = output.with_suffix(".pdf")
    if _same_file(output, args.document):
        print(f"❌ Refusing to overwrite the input document: {output}")
        return 1
    try:
        export_resume_pdf(document, output, config, template_name=args.template)
    except ExportError as exc:
        print(f"❌ Export failed: {exc}")
        return 1
    print(f"✅ PDF exported: {output}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
