# ingest/settings.py

import os
from dotenv import load_dotenv

load_dotenv("env/.env")

# ── CONFIG ───────────────────────────────────────────────────────────
ETHERSCAN_API_URL = os.getenv("ETHERSCAN_API_URL", "https://api.etherscan.io/v2/api")
CHAIN_ID          = int(os.getenv("ETHERSCAN_CHAIN_ID", "1"))
REQUEST_TIMEOUT   = float(os.getenv("REQUEST_TIMEOUT", "15"))  # seconds
LOG_LEVEL         = os.getenv("LOG_LEVEL", "INFO").upper()

# INI section / option holding the key (configparser lowercases options)
API_KEY_SECTION = "api_keys"
API_KEY_NAME    = "ETHERSCAN_API_KEY"
