# src/filemap64/core/ignore.py
from pathlib import Path
from typing import List, Optional

import pathspec

from filemap64.exceptions import FileMap64Error


def load_ignore_spec(patterns: Optional[List[str]] = None, exclude_file: Optional[Path] = None) -> Optional[pathspec.PathSpec]:
    """
    Builds a gitwildmatch PathSpec from command-line patterns and an optional
    gitignore-style file. Returns None when there is nothing to exclude.
    """
    lines: List[str] = []

    if exclude_file is not None:
        try:
            with open(exclude_file, "r", encoding="utf-8") as f:
                lines.extend(f.read().splitlines())
        except OSError as e:
            raise FileMap64Error(f"Could not read exclude file '{exclude_file}': {e}") from e

    if patterns:
        lines.extend(patterns)

    if not any(line.strip() and not line.lstrip().startswith("#") for line in lines):
        return None

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def is_path_ignored(rel_path: Path, spec: Optional[pathspec.PathSpec], is_directory: bool = False) -> bool:
    """Matches a root-relative path; directories get a trailing slash so 'logs/' rules apply."""
    if spec is None:
        return False
    candidate = rel_path.as_posix()
    if is_directory:
        candidate += "/"
    return spec.match_file(candidate)
