class CifraError(Exception):
    """Base exception for cifra."""


class SongLoadError(CifraError):
    """Raised when a song file cannot be read or understood."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load song from {path}: {reason}")


class FetchError(CifraError):
    """Raised when a song URL cannot be fetched."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")
