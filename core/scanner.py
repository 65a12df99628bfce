# core/scanner.py
"""
Extension scanner.

Answers whether a file with a given extension exists under a directory.
Unreadable directories count as empty; nothing is cached between calls.
Anything that is not a directory (regular files, symlinks that aren't
followed, sockets...) is matched on its name.
"""

import os
from typing import Dict, List, Optional, Tuple


def file_extension(name: str) -> Optional[str]:
    """
    Extension of a file name without the dot, or None.

    Dotfiles such as '.bashrc' have no extension, and neither do names
    ending in a dot.
    """
    stem, dot, ext = name.rpartition('.')
    if not dot or not stem or not ext:
        return None
    return ext


def _is_dir(entry: os.DirEntry, follow_symlinks: bool) -> bool:
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False


def has_extension_in(directory: str, extension: str, follow_symlinks: bool = True) -> bool:
    """True if a direct child of `directory` that isn't a directory has exactly `extension`."""
    try:
        with os.scandir(directory) as it:
            for entry in it:
                if not _is_dir(entry, follow_symlinks) and file_extension(entry.name) == extension:
                    return True
    except OSError:
        pass
    return False


def has_extension(root: str, extension: str,
                  follow_symlinks: bool = True,
                  max_depth: Optional[int] = None) -> bool:
    """
    True if any file in the subtree of `root` (root included) has exactly
    `extension`.

    `root` itself is checked first with has_extension_in, then its
    subdirectories depth-first over an explicit stack, in name order.
    Directories are keyed by their resolved path and remembered at the
    shallowest depth they were queued, so a symlink loop is entered once
    and a directory first seen through a long symlinked path is still
    walked when a shorter path reaches it. `max_depth` limits how far
    below `root` the walk goes (0 means root only).
    """
    if has_extension_in(root, extension, follow_symlinks):
        return True

    queued: Dict[str, int] = {os.path.realpath(root): 0}
    stack: List[Tuple[str, int]] = [(root, 0)]

    while stack:
        current, depth = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError:
            continue

        subdirs = []
        for entry in entries:
            if _is_dir(entry, follow_symlinks):
                subdirs.append(entry.path)
            elif depth > 0 and file_extension(entry.name) == extension:
                return True

        if max_depth is not None and depth >= max_depth:
            continue
        # reversed so the first child is popped first
        for path in reversed(subdirs):
            real = os.path.realpath(path)
            seen_at = queued.get(real)
            if seen_at is not None and seen_at <= depth + 1:
                continue
            queued[real] = depth + 1
            stack.append((path, depth + 1))

    return False
