from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .errors import CollisionExhaustedError

MAX_COLLISION_ATTEMPTS = 10_000


def matches_pattern(name: str, pattern: str) -> bool:
    """Case-sensitive shell-style match (``*``, ``?``, ``[...]``) on a base name."""
    return fnmatchcase(name, pattern)


def first_match(name: str, patterns: Iterable[str]) -> Optional[str]:
    for pattern in patterns:
        if matches_pattern(name, pattern):
            return pattern
    return None


def split_name(filename: str) -> Tuple[str, str]:
    """Split at the last dot. ``README`` -> ("README", ""), ``.bashrc`` -> ("", "bashrc")."""
    base, dot, ext = filename.rpartition(".")
    if not dot:
        return filename, ""
    return base, ext


def unique_path(target_dir: Path, filename: str,
                max_attempts: int = MAX_COLLISION_ATTEMPTS) -> Path:
    """
    Return target_dir/filename, or the first free target_dir/base_N.ext
    (target_dir/filename_N without an extension). Never returns an existing path.
    """
    candidate = target_dir / filename
    if not candidate.exists() and not candidate.is_symlink():
        return candidate

    base, ext = split_name(filename)
    for i in range(1, max_attempts + 1):
        if ext:
            candidate = target_dir / f"{base}_{i}.{ext}"
        else:
            candidate = target_dir / f"{filename}_{i}"
        if not candidate.exists() and not candidate.is_symlink():
            return candidate
    raise CollisionExhaustedError(target_dir, filename, max_attempts)
