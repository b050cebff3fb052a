# pipeline/errors.py


class DownloaderError(Exception):
    """Base class for everything the downloader raises on purpose."""


class ConfigError(DownloaderError):
    """Config file missing, malformed, or without the API key."""


class IoError(DownloaderError):
    """Address file unreadable or output destination unwritable."""


class FetchError(DownloaderError):
    """Network failure, bad HTTP status, or unusable Etherscan response."""
