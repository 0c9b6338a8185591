from time import monotonic

from .classifier import DIRECTORY_SKIP, MUSIC_APP_FOLDER, Classifier
from .config import SortConfig
from .errors import MissingSourceDirectoryError, StaleEntryError
from .models import FileEntry, Ignored, NoRule, RunCounters
from .mover import SafeMover
from .reporter import DARKBLUE, PURPLE, YELLOW, Reporter
from .scanner import FolderScanner


class FileSorter:
    """Walks every source directory once and moves what the classifier routes."""

    def __init__(self, config: SortConfig, reporter: Reporter, dry_run: bool = False):
        self.config = config
        self.reporter = reporter
        self.dry_run = dry_run
        self.classifier = Classifier(config)
        self.mover = SafeMover(reporter, dry_run=dry_run)

    def run(self) -> RunCounters:
        started = monotonic()
        counters = RunCounters()

        for root in self.config.destination_roots():
            try:
                self.mover.ensure_dir(root)
            except OSError as exc:
                self.reporter.error(f"Cannot create directory {root}: {exc}")

        for source_dir in self.config.source_dirs:
            try:
                scanner = FolderScanner(source_dir)
                entries = scanner.scan()
            except MissingSourceDirectoryError as exc:
                self.reporter.warning(str(exc))
                continue
            except OSError as exc:
                self.reporter.warning(f"Cannot read source directory {source_dir}: {exc}")
                continue

            self.reporter.info(f"Processing directory: {source_dir}", style=PURPLE)
            for skipped in scanner.skipped_dirs:
                self.reporter.info(f"Skipping directory: {skipped}")
            for entry in entries:
                counters.total_processed += 1
                self.process(entry, counters)

        counters.elapsed = monotonic() - started
        return counters

    def process(self, entry: FileEntry, counters: RunCounters) -> None:
        decision = self.classifier.classify(entry)
        if isinstance(decision, Ignored):
            self._report_ignored(entry, decision)
            return

        try:
            self._check_exists(entry)
        except StaleEntryError as exc:
            self.reporter.warning(str(exc))
            return

        if isinstance(decision, NoRule):
            self.reporter.info(f"No rule for file type, leaving in place: {entry.path}", style=DARKBLUE)
            return

        outcome = self.mover.move_one(entry.path, self.classifier.destination(decision))
        if outcome.error:
            counters.total_failed += 1
        elif outcome.performed:
            counters.total_moved += 1

    def _check_exists(self, entry: FileEntry) -> None:
        # exists() follows symlinks, so dangling links fail here too
        if not entry.path.exists():
            raise StaleEntryError(f"File does not exist: {entry.path}")

    def _report_ignored(self, entry: FileEntry, decision: Ignored) -> None:
        if decision.silent:
            return
        if decision.reason == DIRECTORY_SKIP:
            self.reporter.info(f"Skipping directory: {entry.path}")
        elif decision.reason == MUSIC_APP_FOLDER:
            self.reporter.info(f"Ignoring Music app folder: {entry.path}")
        else:
            self.reporter.info(f"Ignoring: {entry.name} (matches pattern: {decision.reason})", style=YELLOW)
