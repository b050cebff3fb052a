# ingest/addresses.py

from pathlib import Path

from pipeline.errors import IoError


def read_addresses(path) -> list[str]:
    # one address per non-empty line, file order; format is left to Etherscan
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"Failed to read addresses from {path}: {e}") from e
    return [line.strip() for line in text.splitlines() if line.strip()]
