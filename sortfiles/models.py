from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

@dataclass(frozen=True)
class FileEntry:
    """Snapshot of a directory child taken at scan time."""
    path: Path
    name: str
    is_dir: bool
    is_symlink: bool

    @classmethod
    def from_path(cls, p: Path) -> "FileEntry":
        return cls(path=p, name=p.name, is_dir=p.is_dir(), is_symlink=p.is_symlink())

# Classifier decisions
@dataclass(frozen=True)
class Ignored:
    reason: str
    silent: bool = False

@dataclass(frozen=True)
class Screenshot:
    pass

@dataclass(frozen=True)
class CameraSpecial:
    pass

@dataclass(frozen=True)
class ExtensionMatch:
    category: Path

@dataclass(frozen=True)
class NoRule:
    pass

MoveDecision = Union[Ignored, Screenshot, CameraSpecial, ExtensionMatch, NoRule]

@dataclass(frozen=True)
class MoveOutcome:
    source: Path
    final_target: Optional[Path]
    was_dry_run: bool
    error: str = ""  # set when the move failed

    @property
    def performed(self) -> bool:
        return not self.was_dry_run and not self.error

@dataclass
class RunCounters:
    total_processed: int = 0
    total_moved: int = 0
    total_failed: int = 0
    elapsed: float = 0.0
