"""
Module: cli

Purpose:
    Command-line entry point.

    extract PATH   Detect MCQs in an HTML page (.html/.htm), a PDF's text
                   layer (.pdf) or a plain-text file (anything else).
    resolve        Map an answer, or a raw model response, onto options.

Exit codes: 0 on success, 1 when nothing was found or resolved, 2 on
usage errors.

Examples:
    python -m mcq_toolkit extract quiz.html --url https://quizlet.com/x --json
    python -m mcq_toolkit resolve --answer "B) Berlin" Paris Berlin Rome
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from mcq_toolkit import __version__
from mcq_toolkit.answers import parse_model_response, resolve_answer
from mcq_toolkit.core.errors import PdfTextError
from mcq_toolkit.core.utils.serialization import format_mcqs, serialize_mcq
from mcq_toolkit.extractor import DiagnosticsCollector, ExtractionConfig, extract
from mcq_toolkit.extractor.tree.html import parse_html
from mcq_toolkit.extractor.utils.pdf import extract_pdf_text

logger = logging.getLogger("mcq_toolkit")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2

HTML_SUFFIXES = {".html", ".htm"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcq-toolkit",
        description="Detect multiple-choice questions and resolve answers to options",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s extract page.html --url https://docs.google.com/forms/d/x --json
  %(prog)s extract scan.txt --validate
  %(prog)s resolve --answer "B) Berlin" Paris Berlin Rome
  %(prog)s resolve --response '{"answer": "Berlin", "confidence": 90}' Paris Berlin Rome
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    extract_cmd = commands.add_parser("extract", help="Detect MCQs in a file")
    extract_cmd.add_argument("path", type=Path, help="HTML, PDF or text file")
    extract_cmd.add_argument(
        "--url",
        help="Page URL, used to recognise known quiz platforms (HTML only)"
    )
    extract_cmd.add_argument("--json", action="store_true", help="Print MCQs as JSON")
    extract_cmd.add_argument(
        "--validate",
        action="store_true",
        help="Report questions that fail the quality checks"
    )
    extract_cmd.add_argument(
        "--diagnostics",
        type=Path,
        help="Write a diagnostics report (JSON) to this path"
    )

    resolve_cmd = commands.add_parser("resolve", help="Map an answer onto options")
    source = resolve_cmd.add_mutually_exclusive_group(required=True)
    source.add_argument("--answer", help="Free-form answer text")
    source.add_argument("--response", help="Raw model response (JSON or text)")
    resolve_cmd.add_argument("options", nargs="+", help="Options in question order")
    resolve_cmd.add_argument("--json", action="store_true", help="Print the result as JSON")

    return parser


def _run_extract(args: argparse.Namespace) -> int:
    path: Path = args.path
    if not path.is_file():
        logger.error(f"File not found: {path}")
        return EXIT_USAGE

    suffix = path.suffix.lower()
    if args.url and suffix not in HTML_SUFFIXES:
        logger.warning("--url is only used for HTML input, ignoring")

    try:
        if suffix in HTML_SUFFIXES:
            source = parse_html(path.read_bytes(), url=args.url)
        elif suffix == ".pdf":
            source = extract_pdf_text(path)
        else:
            source = path.read_text(encoding="utf-8", errors="replace")
    except (OSError, PdfTextError) as e:
        logger.error(f"Could not read {path}: {e}")
        return EXIT_NOT_FOUND

    diagnostics = DiagnosticsCollector() if args.diagnostics else None
    config = ExtractionConfig(validate=args.validate)
    result = extract(source, config=config, diagnostics=diagnostics)

    if diagnostics is not None:
        diagnostics.generate_report().save(args.diagnostics)

    if args.json:
        payload = []
        for i, mcq in enumerate(result.mcqs):
            item = serialize_mcq(mcq)
            if result.reports:
                item["validation"] = result.reports[i].to_dict()
            payload.append(item)
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    elif result.mcqs:
        print(format_mcqs(result.mcqs))
        for i, report in enumerate(result.reports):
            if not report.is_valid:
                logger.warning(f"Question {i + 1}: {', '.join(report.issues)}")

    for name in result.failures:
        logger.warning(f"Strategy {name} failed; see log for details")
    logger.debug(result.timings.summary())

    if not result.mcqs:
        logger.info(f"No questions found in {path.name}")
        return EXIT_NOT_FOUND
    return EXIT_OK


def _run_resolve(args: argparse.Namespace) -> int:
    if args.response is not None:
        response = parse_model_response(args.response, args.options)
        resolved = response.resolved
        payload = response.to_dict()
    else:
        resolved = resolve_answer(args.answer, args.options)
        payload = resolved.to_dict()

    if args.json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    elif resolved:
        print(f"{resolved.letter}. {resolved.option.text} "
              f"({resolved.method}, confidence {resolved.confidence})")
    else:
        print(f"Unresolved: {resolved.answer!r}")

    return EXIT_OK if resolved else EXIT_NOT_FOUND


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.command == "extract":
        return _run_extract(args)
    return _run_resolve(args)


if __name__ == "__main__":
    sys.exit(main())
