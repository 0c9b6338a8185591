from pathlib import Path
from typing import Dict, Mapping, Optional

from .config import SortConfig, normalize_extension
from .default_rules import CAMERA_DIR_MARKER, CAMERA_EXTENSION
from .models import (
    CameraSpecial,
    ExtensionMatch,
    FileEntry,
    Ignored,
    MoveDecision,
    NoRule,
    Screenshot,
)
from .utils import first_match, split_name

MUSIC_APP_FOLDER = "music-app-folder"
DIRECTORY_SKIP = "directory-skip"


class RuleSet:
    """Holds the extension → destination directory table."""
    def __init__(self, extension_map: Mapping[str, Path]):
        self.map: Dict[str, Path] = {normalize_extension(k): v for k, v in extension_map.items()}

    def lookup(self, ext: str) -> Optional[Path]:
        ext = normalize_extension(ext)
        if ext == "":
            return None
        return self.map.get(ext)


class Classifier:
    """Decides what should happen to a scanned entry. Never touches the filesystem."""
    def __init__(self, config: SortConfig):
        self.config = config
        self.rules = RuleSet(config.extension_map)

    def classify(self, entry: FileEntry) -> MoveDecision:
        pattern = first_match(entry.name, self.config.ignore_patterns)
        if pattern is not None:
            return Ignored(pattern, silent=entry.name in self.config.silent_ignores)

        if entry.is_dir and entry.path == self.config.music_app_dir:
            return Ignored(MUSIC_APP_FOLDER)

        if entry.is_dir:
            if CAMERA_DIR_MARKER in entry.name:
                return CameraSpecial()
            return Ignored(DIRECTORY_SKIP)

        if first_match(entry.name, self.config.screenshot_patterns) is not None:
            return Screenshot()

        _, ext = split_name(entry.name)
        ext = ext.lower()
        if ext == CAMERA_EXTENSION:
            return CameraSpecial()

        category = self.rules.lookup(ext)
        if category is None:
            return NoRule()
        return ExtensionMatch(category)

    def destination(self, decision: MoveDecision) -> Optional[Path]:
        """Target directory for a movable decision, None otherwise."""
        if isinstance(decision, Screenshot):
            return self.config.screenshots_dir
        if isinstance(decision, CameraSpecial):
            return self.config.camera_dir
        if isinstance(decision, ExtensionMatch):
            return decision.category
        return None
