# pipeline/models.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AbiRecord:
    address: str
    abi:     Optional[str] = None      # raw JSON string, None when the fetch failed
    error:   Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.abi is not None


@dataclass(frozen=True)
class AbiEntry:
    record_type:      str          # "function" | "event"
    contract_address: str
    name:             str
    signature:        str          # e.g. transfer(address,uint256)
    selector:         str          # 4-byte selector or 32-byte topic, 0x-prefixed

"""
One AbiRecord per input address (failed fetches included, abi=None).
AbiEntry rows are the per-function / per-event breakdown of successful ABIs.
"""
