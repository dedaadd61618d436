import mimetypes
from functools import partial
from pathlib import Path

from dupscan.logging.logger import Log
from dupscan.processor.exceptions import FileReadError
from dupscan.processor.models import InputFile


def relative_upload_path(root: Path, path: Path) -> str:
    """Build the folder-upload style path: {root.name}/{path relative to root}."""
    return (Path(root.name) / path.relative_to(root)).as_posix()


def read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileReadError(f"Cannot read {path}: {exc}") from exc


class FileLoader:
    """Reads a directory tree from disk into upload records."""

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    def load(self) -> list[InputFile]:
        """List every regular file under the root, in sorted path order.

        Contents are read later, when the file is processed. Files that cannot
        be stat-ed are logged and left out.

        Raises:
            NotADirectoryError: if the root is not a directory.
        """
        if not self._root.is_dir():
            raise NotADirectoryError(f"Not a directory: {self._root}")

        files: list[InputFile] = []
        for path in sorted(p for p in self._root.rglob("*") if p.is_file()):
            try:
                files.append(self.load_file(path))
            except FileReadError as exc:
                Log.warning(str(exc))
        Log.info(f"Loaded {len(files)} files from {self._root}")
        return files

    def load_file(self, path: Path) -> InputFile:
        try:
            stat = path.stat()
        except OSError as exc:
            raise FileReadError(f"Cannot stat {path}: {exc}") from exc
        media_type, _ = mimetypes.guess_type(path.name)
        return InputFile(
            name=path.name,
            size=stat.st_size,
            type=media_type or "",
            read_content=partial(read_file, path),
            last_modified=int(stat.st_mtime * 1000),
            path=relative_upload_path(self._root, path),
        )
