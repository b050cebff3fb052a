# pipeline/runner.py

import logging
import concurrent.futures
from pathlib import Path
from typing import Callable, Optional

from ingest.addresses import read_addresses
from ingest.config import load_api_key
from ingest.etherscan import fetch_abi
from pipeline.abi import expand_abi
from pipeline.errors import FetchError
from pipeline.models import AbiRecord, AbiEntry
from pipeline.snapshot import (
    ensure_dir, write_records, write_entries, FUNCTIONS_FILE, EVENTS_FILE,
)

Fetcher = Callable[[str, str], str]


def _fetch_one(fetch: Fetcher, api_key: str, address: str, fail_fast: bool) -> AbiRecord:
    try:
        return AbiRecord(address, fetch(api_key, address))
    except FetchError as e:
        if fail_fast:
            raise
        logging.warning(f"⚠️  Failed to fetch ABI for {address}: {e}")
        return AbiRecord(address, None, str(e))


def download_abis(
    api_key: str,
    addresses: list[str],
    *,
    fetch: Optional[Fetcher] = None,
    fail_fast: bool = False,
    workers: int = 1,
) -> list[AbiRecord]:
    """
    Fetch one ABI per address and return one record per address, input order.

    Failed fetches become ``AbiRecord(address, None, error)`` unless
    ``fail_fast`` is set, in which case the first FetchError propagates.
    With ``workers > 1`` the calls run on a bounded thread pool.
    """
    fetch = fetch or fetch_abi
    total = len(addresses)

    def job(indexed):
        i, address = indexed
        logging.info(f"📥 Downloading ABI for {address} ({i}/{total})")
        return _fetch_one(fetch, api_key, address, fail_fast)

    jobs = list(enumerate(addresses, start=1))
    if workers <= 1:
        return [job(j) for j in jobs]

    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        # map() yields in submission order
        return list(executor.map(job, jobs))


def expand_records(records: list[AbiRecord]) -> tuple[list[AbiEntry], list[AbiEntry]]:
    functions: list[AbiEntry] = []
    events:    list[AbiEntry] = []
    for rec in records:
        if not rec.ok:
            continue
        fns, evs = expand_abi(rec.address, rec.abi)
        functions.extend(fns)
        events.extend(evs)
    return functions, events


def run(
    addresses_path,
    output_dir,
    config_path,
    *,
    fetch: Optional[Fetcher] = None,
    fail_fast: bool = False,
    workers: int = 1,
) -> list[Path]:
    api_key   = load_api_key(config_path)
    addresses = read_addresses(addresses_path)
    out_dir   = ensure_dir(output_dir)
    logging.info(f"🔑 Config loaded, {len(addresses)} addresses from {addresses_path}")

    records = download_abis(api_key, addresses, fetch=fetch, fail_fast=fail_fast, workers=workers)
    failed = sum(1 for r in records if not r.ok)
    if failed:
        logging.warning(f"⚠️  {failed}/{len(records)} fetches failed; recorded with null abi")

    # abis.parquet lands before the per-item breakdown
    abis_path = write_records(records, out_dir)
    functions, events = expand_records(records)
    return [
        abis_path,
        write_entries(functions, out_dir, FUNCTIONS_FILE),
        write_entries(events, out_dir, EVENTS_FILE),
    ]
