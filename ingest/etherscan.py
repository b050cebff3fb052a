# ingest/etherscan.py

import json

import requests

from ingest.settings import ETHERSCAN_API_URL, CHAIN_ID, REQUEST_TIMEOUT
from pipeline.errors import FetchError


def fetch_abi(
    api_key: str,
    address: str,
    *,
    base_url: str = ETHERSCAN_API_URL,
    chain_id: int = CHAIN_ID,
    timeout: float = REQUEST_TIMEOUT,
) -> str:
    """
    Fetch the ABI of a verified contract from Etherscan.

    One GET, no retries. The ABI comes back as the JSON-encoded string found
    in the response's ``result`` field, untouched.

    :param api_key: Your Etherscan API key.
    :param address: The contract address.
    :return: The ABI as a JSON string.
    :raises FetchError: network error, non-200 status, non-success API status,
        or a ``result`` that is not a JSON array.
    """
    params = {
        "chainid": chain_id,
        "module": "contract",
        "action": "getabi",
        "address": address,
        "apikey": api_key,
    }
    try:
        response = requests.get(base_url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Request for {address} failed: {e}") from e

    if response.status_code != 200:
        raise FetchError(f"Etherscan returned HTTP {response.status_code} for {address}")

    try:
        body = response.json()
    except ValueError as e:
        raise FetchError(f"Etherscan returned a non-JSON body for {address}") from e

    if not isinstance(body, dict):
        raise FetchError(f"Unexpected Etherscan payload for {address}: {body!r}")

    if body.get("status") != "1":
        raise FetchError(f"Etherscan error for {address}: {body.get('message')}: {body.get('result')}")

    result = body.get("result")
    if not isinstance(result, str):
        raise FetchError(f"Missing ABI in Etherscan response for {address}")
    try:
        abi = json.loads(result)
    except ValueError as e:
        raise FetchError(f"Malformed ABI for {address}: {e}") from e
    if not isinstance(abi, list):
        raise FetchError(f"ABI for {address} is not a JSON array")

    return result
