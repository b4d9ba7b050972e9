# cli.py
"""Convert a bid packet PDF into its normalised JSON packet."""

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

# quiet by default; stdout carries only the JSON payload
os.environ.setdefault("LOG_LEVEL", "WARNING")

from logging_utils import configure_logging

configure_logging(sys.stderr)

from pdf_processor import TextExtractionError
from pipeline import parse_bid_packet


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bidpacket-convert",
        description="Parse an airline crew bid packet PDF into structured JSON.",
    )
    parser.add_argument("input", type=Path, help="Bid packet PDF, e.g. BOS_737_DEC2025.pdf")
    parser.add_argument("-o", "--output", type=Path, help="Write JSON here instead of stdout")
    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(sys.stderr)

    if not args.input.exists():
        print(f"Error: File not found at {args.input}", file=sys.stderr)
        return 1

    try:
        packet = asyncio.run(parse_bid_packet(args.input.read_bytes(), args.input.name))
    except TextExtractionError as e:
        print(f"Error: could not read {args.input.name}: {e}", file=sys.stderr)
        return 1

    payload = json.dumps(packet.model_dump(), indent=2 if args.pretty else None)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(payload + "\n", encoding="utf-8")
        print(f"Saved bid packet JSON to {args.output}", file=sys.stderr)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
