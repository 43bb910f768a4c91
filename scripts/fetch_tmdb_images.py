#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys

import requests

from tmdb_images.errors import ImagesError, UpstreamError
from tmdb_images.images import resolve_images
from tmdb_images.settings import load_settings


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fetch_tmdb_images",
        description="Resolve a movie/TV title via TMDb multi search and print its images grouped by language.",
    )
    parser.add_argument("query", nargs="+", help="Free-text title, e.g. Marry My Husband")
    parser.add_argument("--json", action="store_true", help="Print the full JSON payload instead of the text report.")
    parser.add_argument("--verbose", action="store_true", help="Enable INFO logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    settings = load_settings()
    with requests.Session() as session:
        try:
            payload = resolve_images(" ".join(args.query), settings=settings, session=session)
        except ImagesError as exc:
            print(f"error: {exc.message}", file=sys.stderr)
            if isinstance(exc, UpstreamError) and exc.details is not None:
                print(f"details: {json.dumps(exc.details, default=str)}", file=sys.stderr)
            return 1

    if args.json:
        print(json.dumps(payload.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(payload.formatted, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
