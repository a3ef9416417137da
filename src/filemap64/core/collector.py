# src/filemap64/core/collector.py
import os
import stat
from pathlib import Path
from typing import Optional, Sequence

import pathspec

from filemap64.core.ignore import is_path_ignored
from filemap64.exceptions import CollectionError
from filemap64.models import CollectionResult, SkipReason, SourceItem


class Collector:
    """
    Resolves (identifier, bytes) pairs from a directory tree and a list of
    explicit file paths. Entry-level problems are recorded as skipped outcomes;
    only a walk that cannot start raises.
    """

    def __init__(self, root_dir: Optional[Path] = None, ignore_spec: Optional[pathspec.PathSpec] = None):
        self.root_dir = Path(root_dir) if root_dir is not None else None
        self.ignore_spec = ignore_spec

    def collect(self, file_paths: Sequence[str] = ()) -> CollectionResult:
        result = CollectionResult()
        if self.root_dir is not None:
            self._walk(result)
        # Explicit paths always come after the directory walk
        for file_path in file_paths:
            self._add_explicit(Path(file_path), result)
        return result

    def _walk(self, result: CollectionResult) -> None:
        if not self.root_dir.exists():
            raise CollectionError(f"error walking directory: '{self.root_dir}' does not exist")
        if not self.root_dir.is_dir():
            raise CollectionError(f"error walking directory: '{self.root_dir}' is not a directory")

        def on_error(err: OSError) -> None:
            # os.walk reports the root too; an unreadable root means nothing was visited
            if err.filename is not None and Path(err.filename) == self.root_dir:
                raise CollectionError(f"error walking directory: {err}") from err
            result.skip(err.filename or self.root_dir, SkipReason.TRAVERSAL_ERROR, str(err))

        for root, dirs, files in os.walk(self.root_dir, onerror=on_error):
            root_path = Path(root)

            for d in list(dirs):
                dir_rel_path = (root_path / d).relative_to(self.root_dir)
                if is_path_ignored(dir_rel_path, self.ignore_spec, is_directory=True):
                    dirs.remove(d)
                    result.skip(root_path / d, SkipReason.EXCLUDED)
                elif (root_path / d).is_symlink():
                    # os.walk lists the link but never descends into it
                    result.skip(root_path / d, SkipReason.IS_DIRECTORY, "symbolic link to a directory is not followed")

            for f in files:
                file_abs_path = root_path / f
                try:
                    rel_path = file_abs_path.relative_to(self.root_dir)
                except ValueError as e:
                    result.skip(file_abs_path, SkipReason.RELATIVE_PATH_ERROR, str(e))
                    continue

                if is_path_ignored(rel_path, self.ignore_spec):
                    result.skip(file_abs_path, SkipReason.EXCLUDED)
                    continue

                try:
                    content = file_abs_path.read_bytes()
                except OSError as e:
                    result.skip(file_abs_path, SkipReason.READ_ERROR, str(e))
                    continue

                result.add(SourceItem(identifier=str(rel_path), path=file_abs_path, content=content))

    def _add_explicit(self, path: Path, result: CollectionResult) -> None:
        # Any stat failure (ENOENT, EACCES, ENAMETOOLONG, ...) skips this path only
        try:
            st = path.stat()
        except (OSError, ValueError) as e:
            result.skip(path, SkipReason.NOT_FOUND, str(e))
            return
        if stat.S_ISDIR(st.st_mode):
            result.skip(path, SkipReason.IS_DIRECTORY)
            return
        try:
            content = path.read_bytes()
        except OSError as e:
            result.skip(path, SkipReason.READ_ERROR, str(e))
            return
        result.add(SourceItem(identifier=path.name, path=path, content=content))


def collect(directory: Optional[Path], file_paths: Sequence[str] = (), ignore_spec: Optional[pathspec.PathSpec] = None) -> CollectionResult:
    return Collector(directory, ignore_spec).collect(file_paths)
