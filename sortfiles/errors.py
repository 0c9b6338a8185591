class SortFilesError(Exception):
    """Base error for the project."""

class InvalidArgumentError(SortFilesError):
    pass

class RuleError(SortFilesError):
    pass

class MissingSourceDirectoryError(SortFilesError):
    pass

class StaleEntryError(SortFilesError):
    pass

class MoveError(SortFilesError):
    pass

class CollisionExhaustedError(MoveError):
    def __init__(self, target_dir, filename, attempts):
        super().__init__(
            f"No free name for {filename} in {target_dir} after {attempts} attempts"
        )
        self.target_dir = target_dir
        self.filename = filename
        self.attempts = attempts
