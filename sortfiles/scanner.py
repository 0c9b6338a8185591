from pathlib import Path
from typing import List

from .default_rules import CAMERA_DIR_MARKER
from .errors import MissingSourceDirectoryError
from .models import FileEntry


class FolderScanner:
    """
    Lists the direct children of a source directory that may be sorted:
    files (symlinks to files included), broken symlinks, and camera
    folders (directories whose name contains CANON). Never recurses.

    Entries are sorted by name within each group so runs are repeatable.
    Other directories are collected in ``skipped_dirs`` for reporting only.
    """

    def __init__(self, root: Path):
        self.root = root
        self.skipped_dirs: List[Path] = []

    def scan(self) -> List[FileEntry]:
        if not self.root.is_dir():
            raise MissingSourceDirectoryError(f"Source directory does not exist: {self.root}")

        files: List[FileEntry] = []
        camera_dirs: List[FileEntry] = []
        self.skipped_dirs = []
        for p in sorted(self.root.iterdir(), key=lambda c: c.name):
            if p.is_file():
                files.append(FileEntry.from_path(p))
            elif p.is_symlink() and not p.exists():
                # broken link, reported by the sorter
                files.append(FileEntry.from_path(p))
            elif p.is_dir() and not p.is_symlink():
                if CAMERA_DIR_MARKER in p.name:
                    camera_dirs.append(FileEntry.from_path(p))
                else:
                    self.skipped_dirs.append(p)
        return files + camera_dirs
