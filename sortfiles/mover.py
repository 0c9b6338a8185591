from pathlib import Path
import shutil

from .errors import CollisionExhaustedError
from .models import MoveOutcome
from .reporter import Reporter
from .utils import unique_path


class SafeMover:
    """Moves entries into target directories without ever overwriting."""

    def __init__(self, reporter: Reporter, dry_run: bool = True):
        self.reporter = reporter
        self.dry_run = dry_run

    def ensure_dir(self, path: Path) -> None:
        if path.is_dir():
            return
        if self.dry_run:
            self.reporter.info(f"Would create directory: {path}")
            return
        path.mkdir(parents=True, exist_ok=True)
        self.reporter.info(f"Created directory: {path}")

    def move_one(self, source: Path, target_dir: Path) -> MoveOutcome:
        try:
            self.ensure_dir(target_dir)
            target = unique_path(target_dir, source.name)
        except (OSError, CollisionExhaustedError) as exc:
            self.reporter.error(f"Failed to move {source}: {exc}")
            return MoveOutcome(source, None, self.dry_run, error=str(exc))

        if self.dry_run:
            self.reporter.info(f"Would move: {source} -> {target}")
            return MoveOutcome(source, target, was_dry_run=True)

        try:
            shutil.move(str(source), str(target))
        except OSError as exc:
            self.reporter.error(f"Failed to move {source} -> {target}: {exc}")
            return MoveOutcome(source, target, was_dry_run=False, error=str(exc))

        self.reporter.success(f"Moved: {source} -> {target}")
        return MoveOutcome(source, target, was_dry_run=False)
