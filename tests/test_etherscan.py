import json

import pytest
import requests

from ingest.etherscan import fetch_abi
from pipeline.errors import FetchError


@pytest.fixture
def fake_get(monkeypatch):
    calls = []

    def install(response):
        def get(url, params=None, timeout=None):
            calls.append({"url": url, "params": params, "timeout": timeout})
            if isinstance(response, Exception):
                raise response
            return response
        monkeypatch.setattr("ingest.etherscan.requests.get", get)
        return calls

    return install


def test_success_returns_result_string(fake_get, make_response, erc20_abi):
    calls = fake_get(make_response({"status": "1", "message": "OK", "result": erc20_abi}))
    assert fetch_abi("key", "0xabc", base_url="https://x/api", chain_id=1, timeout=5) == erc20_abi

    params = calls[0]["params"]
    assert calls[0]["url"] == "https://x/api"
    assert calls[0]["timeout"] == 5
    assert params["action"] == "getabi"
    assert params["address"] == "0xabc"
    assert params["apikey"] == "key"
    assert params["chainid"] == 1


def test_api_error_status(fake_get, make_response):
    fake_get(make_response({"status": "0", "message": "NOTOK",
                            "result": "Contract source code not verified"}))
    with pytest.raises(FetchError, match="not verified"):
        fetch_abi("key", "0xabc")


def test_http_error(fake_get, make_response):
    fake_get(make_response({"status": "1", "result": "[]"}, status_code=502))
    with pytest.raises(FetchError, match="502"):
        fetch_abi("key", "0xabc")


def test_network_error(fake_get):
    fake_get(requests.ConnectionError("boom"))
    with pytest.raises(FetchError, match="boom"):
        fetch_abi("key", "0xabc")


def test_non_json_body(fake_get, make_response):
    fake_get(make_response(text="<html>rate limited</html>"))
    with pytest.raises(FetchError, match="non-JSON"):
        fetch_abi("key", "0xabc")


@pytest.mark.parametrize("result", [None, "not json", json.dumps({"a": 1})])
def test_malformed_abi_field(fake_get, make_response, result):
    fake_get(make_response({"status": "1", "message": "OK", "result": result}))
    with pytest.raises(FetchError):
        fetch_abi("key", "0xabc")
