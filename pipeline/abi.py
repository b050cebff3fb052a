# pipeline/abi.py

import json
import logging
from typing import Any

from web3 import Web3

from pipeline.models import AbiEntry


def canonical_type(param: dict[str, Any]) -> str:
    """Canonical Solidity type of an ABI input, tuples expanded."""
    typ = param.get("type") if isinstance(param, dict) else None
    if not isinstance(typ, str) or not typ:
        raise ValueError(f"ABI parameter without a type: {param!r}")
    if typ.startswith("tuple"):
        components = param.get("components", [])
        if not isinstance(components, list):
            raise ValueError(f"Tuple components are not a list: {components!r}")
        inner = ",".join(canonical_type(c) for c in components)
        return f"({inner}){typ[len('tuple'):]}"
    return typ


def _signature(item: dict[str, Any]) -> str:
    inputs = item.get("inputs", [])
    if not isinstance(inputs, list):
        raise ValueError(f"ABI inputs are not a list: {inputs!r}")
    types = ",".join(canonical_type(p) for p in inputs)
    return f"{item['name']}({types})"


def function_signature(item: dict[str, Any]) -> str:
    return _signature(item)


def event_signature(item: dict[str, Any]) -> str:
    return _signature(item)


def function_selector(signature: str) -> str:
    return Web3.to_hex(Web3.keccak(text=signature)[:4])


def event_selector(signature: str) -> str:
    return Web3.to_hex(Web3.keccak(text=signature))


def expand_abi(address: str, abi_json: str) -> tuple[list[AbiEntry], list[AbiEntry]]:
    """
    Break an ABI down into function and event rows, in ABI order.

    Constructors, fallbacks, errors and unnamed items are skipped. Items
    without a ``type`` count as functions. Off-schema items (inputs without
    a type, non-list inputs, ...) are logged and skipped.
    """
    functions: list[AbiEntry] = []
    events:    list[AbiEntry] = []

    for item in json.loads(abi_json):
        if not isinstance(item, dict) or not isinstance(item.get("name"), str) or not item["name"]:
            continue
        try:
            match item.get("type", "function"):
                case "function":
                    sig = function_signature(item)
                    functions.append(AbiEntry("function", address, item["name"], sig, function_selector(sig)))
                case "event":
                    sig = event_signature(item)
                    events.append(AbiEntry("event", address, item["name"], sig, event_selector(sig)))
                case _:
                    pass
        except ValueError as e:
            logging.warning(f"⚠️  Skipping malformed ABI item {item['name']!r} for {address}: {e}")

    return functions, events
