from pathlib import Path


class LocalOutputDirectory:
    """Local filesystem implementation of OutputDirectoryPort."""

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path)

    def _path(self, name: str) -> Path:
        return self.base_path / name

    def size(self, name: str) -> int:
        """Byte length of a file. Raises FileNotFoundError."""
        return self._path(name).stat().st_size

    def read_bytes(self, name: str) -> bytes:
        """Full contents of a file. Raises FileNotFoundError."""
        with open(self._path(name), "rb") as f:
            return f.read()
