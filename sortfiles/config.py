from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

from . import default_rules as rules
from .errors import RuleError


def normalize_extension(ext: str) -> str:
    return ext.strip().lstrip(".").lower()


@dataclass(frozen=True)
class SortConfig:
    """Read-only run configuration, resolved against a home directory.

    Behaviour is changed by editing ``default_rules`` or by passing
    ``extra_rules`` to :meth:`default`; there is no configuration file.
    """
    home: Path
    source_dirs: Tuple[Path, ...]
    media_dir: Path
    archive_dir: Path
    docs_dir: Path
    threed_dir: Path
    ignore_patterns: Tuple[str, ...]
    silent_ignores: FrozenSet[str]
    screenshot_patterns: Tuple[str, ...]
    extension_map: Mapping[str, Path]

    @classmethod
    def default(cls, home: Optional[Path] = None,
                extra_rules: Optional[Mapping[str, str]] = None) -> "SortConfig":
        home = Path(home).expanduser() if home else Path.home()

        ext_map: Dict[str, Path] = {}
        for root, subfolder, extensions in rules.CATEGORY_RULES:
            for ext in extensions:
                ext_map[ext] = home / root / subfolder

        # extra_rules: {"epub": "Docs/Books"}, relative to home
        for ext, folder in (extra_rules or {}).items():
            key = normalize_extension(ext)
            if not key:
                raise RuleError(f"Empty extension in extra rule for {folder!r}")
            if key == rules.CAMERA_EXTENSION:
                raise RuleError(f"'.{key}' is reserved for camera files")
            ext_map[key] = home / folder

        return cls(
            home=home,
            source_dirs=tuple(home / name for name in rules.SOURCE_DIR_NAMES),
            media_dir=home / rules.MEDIA_ROOT,
            archive_dir=home / rules.ARCHIVE_ROOT,
            docs_dir=home / rules.DOCS_ROOT,
            threed_dir=home / rules.THREED_ROOT,
            ignore_patterns=tuple(rules.IGNORE_PATTERNS),
            silent_ignores=frozenset(rules.SILENT_IGNORES),
            screenshot_patterns=tuple(rules.SCREENSHOT_PATTERNS),
            extension_map=ext_map,
        )

    def destination_roots(self) -> Tuple[Path, ...]:
        return (self.media_dir, self.archive_dir, self.docs_dir, self.threed_dir)

    @property
    def screenshots_dir(self) -> Path:
        return self.media_dir / rules.SCREENSHOTS_FOLDER

    @property
    def camera_dir(self) -> Path:
        return self.media_dir / rules.CAMERA_FOLDER

    @property
    def music_app_dir(self) -> Path:
        return self.home / "Music" / "Music"
