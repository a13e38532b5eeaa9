"""File-system and glob collaborators used by the XML documentation parser."""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import BinaryIO, List, Union

PathType = Union[str, "os.PathLike[str]"]


class FileSystemService:
    """Abstraction over file existence checks and reads for testability."""

    def exists(self, path: PathType) -> bool:
        return Path(path).is_file()

    def open_read(self, path: PathType) -> BinaryIO:
        return open(path, "rb")


class GlobberService:
    """Wrapper around :mod:`glob` used to expand file patterns."""

    def get_files(self, pattern: str) -> List[str]:
        """Return the regular files matching ``pattern``, sorted by path.

        ``**`` matches any number of directories.
        """

        return sorted(path for path in glob.glob(pattern, recursive=True) if os.path.isfile(path))


__all__ = ["FileSystemService", "GlobberService", "PathType"]
