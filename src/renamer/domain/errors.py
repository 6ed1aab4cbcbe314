from __future__ import annotations


class RenamerError(Exception):
    """Base class for conditions reported back to the caller."""


class InvalidPathError(RenamerError, RuntimeError):
    """A directory or file does not exist or cannot be read."""


class InvalidPatternError(RenamerError, ValueError):
    """A user supplied (or shortcut expanded) regex does not compile."""


class MismatchedNamesError(RenamerError, ValueError):
    def __init__(self, file_count: int, name_count: int) -> None:
        super().__init__(
            f"number of new names ({name_count}) does not match number of files ({file_count})"
        )
        self.file_count = file_count
        self.name_count = name_count


class InvalidFileNameError(RenamerError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"invalid file name: {name!r}")
        self.name = name
