"""File access used by the configuration engine.

All disk reads, existence probes and the single default-file write go
through a ``ConfigFileSource`` so the parse, import and merge logic can be
exercised against an in-memory source.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfigFileSource(Protocol):
    """Protocol for configuration file access."""

    def read_text(self, path: Path) -> str:
        """Read the whole file as UTF-8 text.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: For any other read failure.
            UnicodeDecodeError: If the file is not valid UTF-8.
            ValueError: If the path cannot be passed to the OS.
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check whether a file exists at ``path``."""
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write ``content`` to ``path``, creating parent directories.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        ...


class LocalFileSource:
    """ConfigFileSource backed by the local filesystem."""

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def write_text(self, path: Path, content: str) -> None:
        """Write content atomically.

        Writes to a temporary sibling first, then renames it into place so
        a concurrent reader never sees a partial template.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        temp_path.write_text(content, encoding="utf-8")
        temp_path.replace(path)
