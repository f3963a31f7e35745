"""Key=value configuration file reader."""

from __future__ import annotations

from pathlib import Path

MISSING = "null"


class Config:
    """Configuration loaded from a text file of ``key=value`` lines."""

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)
        self._values: dict[str, str] = {}

    def get(self, prop: str) -> str:
        """Return the value stored for ``prop``, or ``"null"`` if absent."""
        return self._values.get(prop, MISSING)

    def load_from_file(self) -> None:
        """Read the file; a missing or unreadable file leaves the config unchanged.

        Only the text between the first and second ``=`` is kept as the value.
        """
        try:
            with self.file_path.open(encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError:
            return
        for line in lines:
            parts = line.split("=")
            key = parts[0]
            value = parts[1] if len(parts) > 1 else ""
            self._values[key] = value