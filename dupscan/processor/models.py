from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class InputFile:
    """A single uploaded file as supplied by the caller.

    ``read_content`` returns the raw bytes. It is only called once the declared
    size has passed the ceiling, from the worker handling the file.
    """

    name: str
    size: int
    type: str
    read_content: Callable[[], bytes]
    last_modified: int
    path: str | None = None


@dataclass(frozen=True)
class ProcessedFile:
    """An accepted file with its decoded, canonical and fingerprinted content."""

    name: str
    size: int
    type: str
    content: str
    normalized_content: str
    hash: str
    last_modified: int
    path: str
    is_from_folder: bool


@dataclass(frozen=True)
class DuplicateGroup:
    """Two or more files sharing one fingerprint."""

    hash: str
    files: list[ProcessedFile]
    count: int

    def __post_init__(self) -> None:
        if self.count != len(self.files) or self.count < 2:
            raise ValueError(
                f"DuplicateGroup {self.hash} needs count == len(files) >= 2, "
                f"got count={self.count}, files={len(self.files)}"
            )


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of one batch: duplicate groups plus the remaining unique files."""

    duplicate_groups: list[DuplicateGroup] = field(default_factory=list)
    unique_files: list[ProcessedFile] = field(default_factory=list)
    total_files: int = 0
    duplicate_count: int = 0
