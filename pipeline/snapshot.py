# pipeline/snapshot.py

import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Iterable

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from pipeline.errors import IoError
from pipeline.models import AbiRecord, AbiEntry

# ── Schemas ──────────────────────────────────────────────────────────
RECORD_SCHEMA = pa.schema([(f.name, pa.string()) for f in fields(AbiRecord)])
ENTRY_SCHEMA  = pa.schema([(f.name, pa.string()) for f in fields(AbiEntry)])

ABIS_FILE      = "abis.parquet"
FUNCTIONS_FILE = "functions.parquet"
EVENTS_FILE    = "events.parquet"


def ensure_dir(out_dir) -> Path:
    out_dir = Path(out_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoError(f"Failed to create output dir {out_dir}: {e}") from e
    return out_dir


def _write(rows: list[dict], schema: pa.Schema, outfile: Path) -> Path:
    # whole file in one go; an existing file is replaced, never appended to
    df = pd.DataFrame(rows, columns=schema.names)
    table = pa.Table.from_pandas(df, schema=schema, preserve_index=False)
    try:
        pq.write_table(table, outfile)
    except OSError as e:
        raise IoError(f"Failed to write {outfile}: {e}") from e
    logging.info(f"💾 Wrote {len(rows)} rows to {outfile}")
    return outfile


def write_records(records: Iterable[AbiRecord], out_dir, filename: str = ABIS_FILE) -> Path:
    out_dir = ensure_dir(out_dir)
    return _write([asdict(r) for r in records], RECORD_SCHEMA, out_dir / filename)


def write_entries(entries: Iterable[AbiEntry], out_dir, filename: str) -> Path:
    out_dir = ensure_dir(out_dir)
    return _write([asdict(e) for e in entries], ENTRY_SCHEMA, out_dir / filename)


def read_records(path) -> list[AbiRecord]:
    try:
        table = pq.read_table(path)
    except OSError as e:
        raise IoError(f"Failed to read {path}: {e}") from e
    return [AbiRecord(**row) for row in table.to_pylist()]
