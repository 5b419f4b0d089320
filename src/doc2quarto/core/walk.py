"""Tree walker: mirror a Docusaurus docs tree into a Quarto project"""

import logging
import shutil
from pathlib import Path
from typing import Callable, Optional

from doc2quarto.config import Settings
from doc2quarto.core.errors import DestinationUnwritable, InputNotFound
from doc2quarto.core.models import (
    EventKindEnum,
    FileError,
    FileEvent,
    FileWarning,
    WalkReport,
)
from doc2quarto.core.transform import convert_content

logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md', '.mdx'}

EventCallback = Callable[[FileEvent], None]

_LOG_LEVELS = {
    EventKindEnum.transformed: logging.INFO,
    EventKindEnum.copied:      logging.INFO,
    EventKindEnum.directory:   logging.DEBUG,
    EventKindEnum.skipped:     logging.WARNING,
    EventKindEnum.warning:     logging.WARNING,
    EventKindEnum.failed:      logging.ERROR,
}


def is_markdown(path: Path) -> bool:
    return path.suffix.lower() in MD_EXTENSIONS


def _list_dir(path: Path) -> list[Path]:
    """Directory entries sorted by name for reproducible output."""
    return sorted(path.iterdir(), key=lambda p: p.name)


def count_files(root: Path) -> int:
    """Number of non-directory entries under root; 0 when root is not a directory."""
    root = Path(root)
    if not root.is_dir():
        return 0
    return sum(1 for p in root.rglob('*') if not p.is_dir())


def dest_name(path: Path, output_suffix: str = ".qmd") -> str:
    """Destination file name: markdown gets output_suffix, everything else keeps its name."""
    return path.stem + output_suffix if is_markdown(path) else path.name


class TreeWalker:
    """Depth-first mirror of source under dest; per-entry failures are recorded, not raised."""

    def __init__(self, settings: Settings, on_event: Optional[EventCallback] = None):
        self.settings = settings
        self.on_event = on_event
        self.report = WalkReport()
        self._dest_root: Optional[Path] = None
        self._claimed: dict[Path, Path] = {}

    # -- Public API ----------------------------------------------------------

    def run(self, source: Path, dest: Path) -> WalkReport:
        """Walk source into dest. Raises InputNotFound / DestinationUnwritable for bad roots."""
        source, dest = Path(source), Path(dest)
        if not source.is_dir():
            raise InputNotFound(f"Source directory does not exist: {source}")
        try:
            entries = _list_dir(source)
        except OSError as e:
            raise InputNotFound(f"Source directory is not readable: {source}: {e}") from e
        self._dest_root = dest.resolve()
        try:
            self._ensure_dir(source, dest)
        except OSError as e:
            raise DestinationUnwritable(f"Failed to create destination directory {dest}: {e}") from e
        self._visit(entries, dest)
        return self.report

    # -- Internals -----------------------------------------------------------

    def _emit(self, kind: EventKindEnum, source: Path, dest: Path = None, detail: str = None) -> None:
        event = FileEvent(kind=kind, source=source, dest=dest, detail=detail)
        msg = f"{kind.value}: {source}" + (f" -> {dest}" if dest else "") + (f" ({detail})" if detail else "")
        logger.log(_LOG_LEVELS[kind], msg)
        if self.on_event:
            self.on_event(event)

    def _fail(self, source: Path, exc: Exception, dest: Path = None) -> None:
        self.report.failures.append(FileError(path=source, error=str(exc)))
        self._emit(EventKindEnum.failed, source, dest, str(exc))

    def _ensure_dir(self, source: Path, dest: Path) -> None:
        """Create dest if absent; tolerates concurrent creation."""
        if dest.is_dir():
            return
        if not self.settings.dry_run:
            dest.mkdir(parents=True, exist_ok=True)
        self.report.directories += 1
        self._emit(EventKindEnum.directory, source, dest)

    def _walk(self, source: Path, dest: Path) -> None:
        try:
            entries = _list_dir(source)
            self._ensure_dir(source, dest)
        except OSError as e:
            self._fail(source, e, dest)
            return
        self._visit(entries, dest)

    def _visit(self, entries: list[Path], dest: Path) -> None:
        for entry in entries:
            if entry.is_dir():
                if entry.is_symlink():
                    self._skip(entry, "symlinked directory")
                elif entry.resolve() == self._dest_root:
                    self._skip(entry, "destination directory")
                else:
                    self._walk(entry, dest / entry.name)
                continue

            target = dest / dest_name(entry, self.settings.output_suffix)
            if not self._claim(entry, target):
                continue
            if is_markdown(entry):
                self._transform(entry, target)
            else:
                self._copy(entry, target)

    def _claim(self, source: Path, target: Path) -> bool:
        """Reserve target for source; a second source mapping to the same file is a failure."""
        owner = self._claimed.setdefault(target, source)
        if owner == source:
            return True
        msg = f"destination collision: {target.name} already written from {owner.name}"
        self.report.failures.append(FileError(path=source, error=msg))
        self._emit(EventKindEnum.failed, source, target, msg)
        return False

    def _skip(self, source: Path, reason: str) -> None:
        self.report.skipped += 1
        self._emit(EventKindEnum.skipped, source, detail=reason)

    def _transform(self, source: Path, dest: Path) -> None:
        try:
            # bytes in/out so CRLF endings survive untranslated
            content = source.read_bytes().decode('utf-8')
            result = convert_content(
                content,
                protect_code_fences=self.settings.protect_code_fences,
                parser_config=self.settings.parser_config,
            )
            if not self.settings.dry_run:
                dest.write_bytes(result.content.encode('utf-8'))
        except (OSError, UnicodeDecodeError) as e:
            self._fail(source, e, dest)
            return

        for warning in result.warnings:
            self.report.warnings.append(FileWarning(path=source, warning=warning))
            self._emit(EventKindEnum.warning, source, dest, warning)
        self.report.transformed += 1
        self._emit(EventKindEnum.transformed, source, dest)

    def _copy(self, source: Path, dest: Path) -> None:
        try:
            if self.settings.dry_run:
                source.stat()
            else:
                shutil.copy2(source, dest)
        except OSError as e:
            self._fail(source, e, dest)
            return
        self.report.copied += 1
        self._emit(EventKindEnum.copied, source, dest)


def walk_tree(
    source: Path,
    dest: Path,
    settings: Settings = None,
    on_event: Optional[EventCallback] = None,
    ) -> WalkReport:
    """Convert every markdown file under source into dest and copy the rest."""
    return TreeWalker(settings or Settings(), on_event).run(source, dest)
