# core/classifier.py
"""
Language classifier.

Decides which language a project directory belongs to by testing the marker
table against the directory's entries.
"""

import os
from typing import List, Optional, Sequence

from .exceptions import ScanError
from .languages import LANGUAGE_TABLE
from .models import LanguageCategory, LanguageProfile, Marker, Match
from .scanner import has_extension, has_extension_in


class LanguageClassifier:
    """
    Classifies a directory against an ordered marker table.

    Profiles are tested in table order and markers in list order, so when
    markers of several languages are present the earlier profile wins no
    matter how the filesystem orders the entries. A marker matches when:

      * it is a name marker and an entry of `root` has exactly that name, or
      * it is an extension marker and a file directly in `root` has it, or
      * it is an extension marker and a file anywhere under one of the
        subdirectories of `root` has it.
    """

    def __init__(self, root: str = ".",
                 table: Sequence[LanguageProfile] = LANGUAGE_TABLE,
                 follow_symlinks: bool = True,
                 max_depth: Optional[int] = None):
        self.root            = root
        self.table           = tuple(table)
        self.follow_symlinks = follow_symlinks
        self.max_depth       = max_depth

    def _entries(self) -> List[os.DirEntry]:
        try:
            with os.scandir(self.root) as it:
                entries = list(it)
        except OSError as e:
            raise ScanError(
                f"Cannot read directory {os.path.abspath(self.root)}: {e.strerror or e}",
                context={"path": os.path.abspath(self.root)}
            )
        return sorted(entries, key=lambda e: e.name)

    def _is_dir(self, entry: os.DirEntry) -> bool:
        try:
            return entry.is_dir(follow_symlinks=self.follow_symlinks)
        except OSError:
            return False

    def _match_marker(self, profile: LanguageProfile, marker: Marker,
                      entries: List[os.DirEntry]) -> Optional[Match]:
        if not marker.is_extension:
            for entry in entries:
                if entry.name == marker.value:
                    return Match(profile.category, marker, entry.name)
            return None

        if has_extension_in(self.root, marker.value, self.follow_symlinks):
            return Match(profile.category, marker)

        # the subtree limit is relative to root, so the entry itself is one level down
        depth = None if self.max_depth is None else self.max_depth - 1
        if depth is not None and depth < 0:
            return None
        for entry in entries:
            if self._is_dir(entry) and has_extension(
                    entry.path, marker.value,
                    follow_symlinks=self.follow_symlinks, max_depth=depth):
                return Match(profile.category, marker, entry.name)
        return None

    def explain(self) -> Optional[Match]:
        """
        Return the match that decides the classification, or None if no
        marker is present.

        Raises:
            ScanError: if `root` can't be listed
        """
        entries = self._entries()
        if not entries:
            return None
        for profile in self.table:
            for marker in profile.markers:
                hit = self._match_marker(profile, marker, entries)
                if hit:
                    return hit
        return None

    def detect(self) -> Optional[LanguageCategory]:
        hit = self.explain()
        return hit.category if hit else None


def detect_language(root: str = ".", **scan_options) -> Optional[LanguageCategory]:
    """Classify `root` with the default marker table."""
    return LanguageClassifier(root, **scan_options).detect()
