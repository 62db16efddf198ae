#!/usr/bin/env python3
"""CLI for a one-off Unsplash photo search.

Prints one URL per line (or a single random URL with --random). The access key
comes from --access-key or the UNSPLASH_ACCESS_KEY environment variable.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path so 'grabpic' is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from grabpic import GrabPicError, grab_pic
from grabpic.core.config import resolve_access_key, settings
from grabpic.core.pyd_schemas import ImageSize, Orientation

logger = logging.getLogger("grab_pic")


def main() -> int:
    parser = argparse.ArgumentParser(description="Search Unsplash and print image URLs")
    parser.add_argument("query", help="Search term")
    parser.add_argument("--count", type=int, default=5, help="Number of images (1-30)")
    parser.add_argument(
        "--orientation",
        choices=[o.value for o in Orientation],
        default=None,
        help="Orientation filter (default: none)",
    )
    parser.add_argument(
        "--size",
        choices=[s.value for s in ImageSize],
        default=ImageSize.regular.value,
        help="Size tier to print",
    )
    parser.add_argument("--access-key", default=None, help="Unsplash access key")
    parser.add_argument("--random", action="store_true", help="Print one random URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper()),
        format=settings.log_format,
        datefmt=settings.log_date_format,
    )

    options = {"count": args.count, "orientation": args.orientation, "size": args.size}
    try:
        result = asyncio.run(grab_pic(args.query, resolve_access_key(args.access_key), options))
    except GrabPicError as e:
        logger.error("%s (%s, status %s)", e.message, e.error_type.value, e.status_code)
        return 1

    if args.random:
        print(result.random())
    else:
        for url in result.all():
            print(url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
