#!/usr/bin/env python3
"""
CLI entrypoint: build a Google Slides deck for one company without an MCP client.
"""

from __future__ import annotations

import argparse
import logging
import sys

from company_data import lookup
from config import SlidesConfig
from logging_utils import log_exception, setup_logging
from presentation_orchestrator import build_presentation
from session_state import SessionState

logger = logging.getLogger("run_deck")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a Google Slides deck for a company.")
    parser.add_argument("company", type=str, help="Company name (deck title).")
    parser.add_argument("--csv", type=str, default=SlidesConfig.DEFAULT_CSV_PATH,
                        help="CSV file with company data; adds an overview slide.")
    parser.add_argument("--key-column", type=str, default=SlidesConfig.COMPANY_KEY_COLUMN,
                        help="CSV column holding the company name.")
    parser.add_argument("--no-presets", action="store_true", help="Skip the preset content slides.")
    parser.add_argument("--log-dir", type=str, default=SlidesConfig.LOG_DIR, help="Write a run log here.")
    parser.add_argument("--debug", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_dir, "DEBUG" if args.debug else SlidesConfig.LOG_LEVEL)

    record = None
    if args.csv:
        try:
            record = lookup(args.company, args.csv, args.key_column)
        except Exception as exc:
            log_exception(logger, exc, context="lookup", company=args.company, csv=args.csv)
            return 1
        if record is None:
            logger.warning(f"⚠️ No row for '{args.company}' in {args.csv}; building without overview")

    session = SessionState()
    try:
        presentation_id = build_presentation(
            args.company,
            session=session,
            slides=[] if args.no_presets else None,
            record=record,
            key_column=args.key_column,
        )
    except Exception as exc:
        log_exception(logger, exc, context="build_presentation", company=args.company,
                      document_id=getattr(exc, "document_id", None))
        for pending in session.unpopulated():
            logger.error(f"   Unpopulated slide left in deck: {pending.slide_id} ({pending.title})")
        return 1

    print(presentation_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
