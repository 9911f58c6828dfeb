"""
Candidate file selection for Passcan
"""
import os
from typing import Iterator, List

from passcan.config import CODE_EXTENSIONS, IGNORED_DIRS, IGNORED_EXTENSIONS, IGNORED_FILES
from passcan.utils import has_suffix, is_binary_file

_IGNORED_DIRS_LOWER = frozenset(d.lower() for d in IGNORED_DIRS)


def is_ignored_dir(name: str) -> bool:
    return name.lower() in _IGNORED_DIRS_LOWER


def is_ignored_file(name: str) -> bool:
    return name in IGNORED_FILES or has_suffix(name, IGNORED_EXTENSIONS)


def is_code_file(name: str) -> bool:
    return has_suffix(name, CODE_EXTENSIONS)


def is_candidate(file_path: str) -> bool:
    """Apply the name rules, then the binary heuristic, to one file"""
    name = os.path.basename(file_path)
    if is_ignored_file(name) or not is_code_file(name):
        return False
    return not is_binary_file(file_path)


def iter_candidate_files(root: str) -> Iterator[str]:
    """
    Walk root and yield every file eligible for scanning.

    Ignored directories are pruned, never descended into. A missing or
    unreadable root yields nothing; os.walk swallows the listing error.
    """
    root = os.fspath(root)
    if os.path.isfile(root):
        if is_candidate(root):
            yield root
        return

    for dirpath, dirs, files in os.walk(root):
        dirs[:] = [d for d in dirs if not is_ignored_dir(d)]
        for filename in files:
            file_path = os.path.join(dirpath, filename)
            # skip fifos, sockets and dangling links
            if os.path.isfile(file_path) and is_candidate(file_path):
                yield file_path


def collect_files(root: str) -> List[str]:
    """Candidate files under root, sorted by path"""
    return sorted(iter_candidate_files(root))
