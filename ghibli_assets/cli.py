"""Command-line entry point for the image pipeline."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Iterable, Sequence

from .config import DEFAULT_API_BASE, DEFAULT_MAPPING_FILE, PipelineConfig
from .errors import GhibliAssetsError
from .lookup import ImageLookup
from .pipeline import format_summary, run_pipeline, summarize_directory

logger = logging.getLogger("ghibli_assets.cli")


def _ensure_command_prefix(argv: Sequence[str], commands: Iterable[str]) -> Sequence[str]:
    if not argv:
        return ("download",)
    first = argv[0]
    if first in commands or first in ("-h", "--help"):
        return argv
    return ("download", *argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def _add_download_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=".",
        type=Path,
        help="Site root containing public/images and lib/image-mapping.json",
    )
    parser.add_argument(
        "--images-dir",
        type=Path,
        default=None,
        help="Override the directory where WebP images are written",
    )
    parser.add_argument(
        "--mapping-file",
        type=Path,
        default=None,
        help="Override the path of the JSON image mapping",
    )
    parser.add_argument(
        "--api-base",
        default=DEFAULT_API_BASE,
        help="Base URL of the films API",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def _add_lookup_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("film_id", help="Film identifier to resolve")
    parser.add_argument(
        "--banner",
        action="store_true",
        help="Resolve the banner instead of the poster",
    )
    parser.add_argument(
        "--mapping-file",
        type=Path,
        default=DEFAULT_MAPPING_FILE,
        help="Path of the JSON image mapping",
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Download Ghibli film artwork and convert it to WebP for the static site.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    download_parser = subparsers.add_parser(
        "download", help="Fetch films, download posters and banners, write the mapping"
    )
    _add_download_arguments(download_parser)

    lookup_parser = subparsers.add_parser(
        "lookup", help="Print the local image path recorded for a film"
    )
    _add_lookup_arguments(lookup_parser)

    argv = list(sys.argv[1:] if argv is None else argv)
    argv = list(_ensure_command_prefix(argv, subparsers.choices.keys()))
    return parser.parse_args(argv)


def _run_download(args: argparse.Namespace) -> int:
    _configure_logging(args.verbose)

    root = Path(args.root).resolve()
    config = PipelineConfig.from_root(root, api_base=args.api_base)
    if args.images_dir is not None:
        config.images_dir = Path(args.images_dir).resolve()
    if args.mapping_file is not None:
        config.mapping_file = Path(args.mapping_file).resolve()

    logger.info("Starting Ghibli image download and optimization...")
    overall_start = time.perf_counter()
    try:
        result = run_pipeline(config)
    except GhibliAssetsError as exc:
        logger.error("Error: %s", exc)
        return 1
    total_elapsed = time.perf_counter() - overall_start

    summary = summarize_directory(config.images_dir)
    print(format_summary(result, summary))
    logger.info(
        "Finished in %.2fs (%d/%d images processed)",
        total_elapsed,
        result.downloaded_count,
        result.expected_count,
    )
    return 0


def _run_lookup(args: argparse.Namespace) -> int:
    lookup = ImageLookup.from_file(args.mapping_file)
    if args.banner:
        print(lookup.get_film_banner(args.film_id))
    else:
        print(lookup.get_film_poster(args.film_id))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.command == "download":
        return _run_download(args)
    return _run_lookup(args)


if __name__ == "__main__":
    sys.exit(main())
