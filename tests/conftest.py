import json

import pytest

ERC20_ABI = [
    {"type": "function", "name": "transfer", "stateMutability": "nonpayable",
     "inputs": [{"name": "to", "type": "address"}, {"name": "value", "type": "uint256"}],
     "outputs": [{"name": "", "type": "bool"}]},
    {"type": "function", "name": "balanceOf", "stateMutability": "view",
     "inputs": [{"name": "owner", "type": "address"}],
     "outputs": [{"name": "", "type": "uint256"}]},
    {"type": "event", "name": "Transfer", "anonymous": False,
     "inputs": [{"name": "from", "type": "address", "indexed": True},
                {"name": "to", "type": "address", "indexed": True},
                {"name": "value", "type": "uint256", "indexed": False}]},
    {"type": "constructor", "inputs": []},
]

ADDR_A = "0x7BeA39867e4169DBe237d55C8242a8f2fcDcc387"
ADDR_B = "0x3F78BBD206e4D3c504Eb854232EdA7e47E9Fd8FC"


class FakeResponse:
    def __init__(self, body=None, status_code=200, text=None):
        self._body = body
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        if self._body is None:
            return json.loads(self.text)
        return self._body


@pytest.fixture
def erc20_abi():
    return json.dumps(ERC20_ABI)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[api_keys]\nETHERSCAN_API_KEY = test-key\n")
    return path


@pytest.fixture
def addresses_file(tmp_path):
    path = tmp_path / "addresses.txt"
    path.write_text(f"{ADDR_A}\n\n{ADDR_B}\n")
    return path


@pytest.fixture
def addrs():
    return ADDR_A, ADDR_B


@pytest.fixture
def make_response():
    return FakeResponse
