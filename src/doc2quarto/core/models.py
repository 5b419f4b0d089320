"""Result and event models shared by the transformer and the tree walker"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel


class EventKindEnum(str, Enum):
    """Outcome of visiting a single tree entry"""
    transformed = "transformed"
    copied = "copied"
    directory = "directory"
    skipped = "skipped"
    failed = "failed"
    warning = "warning"


class FileEvent(BaseModel):
    """A single per-entry event streamed to the progress reporter."""
    kind: EventKindEnum
    source: Path
    dest: Optional[Path] = None
    detail: Optional[str] = None


class FileError(BaseModel):
    path: Path
    error: str


class FileWarning(BaseModel):
    path: Path
    warning: str


class WalkReport(BaseModel):
    """Aggregate counts for one tree conversion run."""
    transformed: int = 0
    copied:      int = 0
    directories: int = 0
    skipped:     int = 0
    failures:    list[FileError] = []
    warnings:    list[FileWarning] = []

    @property
    def failed(self) -> int:
        return len(self.failures)


@dataclass
class ConversionResult:
    """Converted document text plus non-fatal warnings; not persisted."""
    content:  str
    warnings: list[str] = field(default_factory=list)
