# pipeline/cli.py

import argparse
import logging
import sys

from ingest.settings import LOG_LEVEL
from pipeline.errors import DownloaderError
from pipeline.runner import run

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="etherscan-abi-downloader",
        description="Download contract ABIs from Etherscan into Parquet files.",
    )
    parser.add_argument("-a", "--addresses", required=True,
                        help="File containing contract addresses (one per line)")
    parser.add_argument("-o", "--output-dir", required=True,
                        help="Directory to write the parquet files to")
    parser.add_argument("-c", "--config", required=True,
                        help="INI file with [api_keys] ETHERSCAN_API_KEY")
    parser.add_argument("--workers", type=int, default=1,
                        help="Concurrent requests (default: 1, sequential)")
    parser.add_argument("--fail-fast", action="store_true",
                        help="Abort on the first failed fetch instead of recording a null abi")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level_ok = isinstance(logging.getLevelName(LOG_LEVEL), int)
    logging.basicConfig(level=LOG_LEVEL if level_ok else logging.INFO, format="%(asctime)s %(message)s")
    if not level_ok:
        logging.warning(f"⚠️  Unknown LOG_LEVEL {LOG_LEVEL!r}, using INFO")

    if args.workers < 1:
        logging.error("⛔️ --workers must be at least 1")
        return 1

    try:
        paths = run(
            args.addresses, args.output_dir, args.config,
            fail_fast=args.fail_fast, workers=args.workers,
        )
    except DownloaderError as e:
        logging.error(f"⛔️ {e}")
        return 1

    logging.info(f"✅ ABI download completed: {', '.join(str(p) for p in paths)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
