from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Sequence

REQUIRED_FILES = (
    "index.html",
    "error.html",
)


@dataclass(frozen=True)
class AllPresent:
    """Every expected file was found."""

    missing: tuple[str, ...] = field(default=(), init=False)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class SomeMissing:
    """One or more expected files were not found, in declared order."""

    missing: tuple[str, ...]

    def __post_init__(self):
        if not self.missing:
            raise ValueError("SomeMissing needs at least one missing file.")

    @property
    def ok(self) -> bool:
        return False


class MissingRequiredFilesError(FileNotFoundError):
    """Raised by require() when any expected file is absent."""

    def __init__(self, missing: Sequence[str]):
        self.missing = tuple(missing)
        super().__init__(f"Missing required files: {list(self.missing)}")


def check(base_dir: str | os.PathLike, expected_files: Sequence[str] = REQUIRED_FILES) -> AllPresent | SomeMissing:
    """Test each expected file under base_dir for existence.

    Entries must be relative to base_dir. Unreadable paths, broken
    symlinks and a nonexistent base_dir count as missing.
    """
    for fname in expected_files:
        if os.path.isabs(fname):
            raise ValueError(f"Expected file must be relative: {fname}")
    missing = [fname for fname in expected_files if not os.path.exists(os.path.join(base_dir, fname))]
    if missing:
        return SomeMissing(tuple(missing))
    return AllPresent()


def require(base_dir: str | os.PathLike, expected_files: Sequence[str] = REQUIRED_FILES) -> AllPresent:
    result = check(base_dir, expected_files)
    if not result.ok:
        raise MissingRequiredFilesError(result.missing)
    return result
