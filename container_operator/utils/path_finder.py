"""Utilities for finding and reading container ID files."""

import glob
import os
from pathlib import Path
from typing import List

from ..services.exceptions import GlobPatternError


class PathFinder:
    """Utility class for resolving paths and glob patterns."""

    @staticmethod
    def rel_to_abs_path(path: str, dir: str) -> str:
        """Make a relative path absolute by joining it onto dir."""
        if os.path.isabs(path):
            return path
        return os.path.normpath(os.path.join(dir, path))

    @staticmethod
    def tilde_to_home(path: str) -> str:
        """Expand a leading ~/ to the current home directory.

        The path is returned unaltered if the home directory cannot be
        determined.
        """
        if not path or not path.startswith("~/"):
            return path
        try:
            home = str(Path.home())
        except RuntimeError:
            return path
        if not home:
            return path
        return os.path.join(home, path[2:])

    @staticmethod
    def validate_glob(pattern: str) -> None:
        """Check that a glob pattern is well formed.

        Character classes must be closed, non-empty, and every range in them
        needs both ends. A pattern may not end in a lone backslash.

        Raises:
            GlobPatternError: If the pattern is malformed
        """
        n = len(pattern)

        def class_char(k: int) -> int:
            # index just past one class member starting at k
            if k >= n:
                raise GlobPatternError(f"Unterminated character class in pattern: {pattern}")
            if pattern[k] in "-]":
                raise GlobPatternError(f"Bad range in character class in pattern: {pattern}")
            if pattern[k] == "\\":
                k += 1
                if k >= n:
                    raise GlobPatternError(f"Unterminated character class in pattern: {pattern}")
            return k + 1

        i = 0
        while i < n:
            if pattern[i] == "\\":
                if i + 1 >= n:
                    raise GlobPatternError(f"Trailing backslash in pattern: {pattern}")
                i += 2
                continue
            if pattern[i] != "[":
                i += 1
                continue
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            if j < n and pattern[j] == "]":
                raise GlobPatternError(f"Empty character class in pattern: {pattern}")
            while True:
                if j >= n:
                    raise GlobPatternError(f"Unterminated character class in pattern: {pattern}")
                if pattern[j] == "]":
                    break
                j = class_char(j)
                if j < n and pattern[j] == "-":
                    j = class_char(j + 1)
            i = j + 1

    @staticmethod
    def expand_glob(pattern: str) -> List[str]:
        """Return the existing paths matching pattern, sorted.

        Raises:
            GlobPatternError: If the pattern is malformed
        """
        PathFinder.validate_glob(pattern)
        return sorted(glob.glob(pattern, include_hidden=True))

    @staticmethod
    def read_id_file(path: str) -> str:
        """Read an ID file, dropping exactly one trailing newline."""
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
        return content.removesuffix("\n")
