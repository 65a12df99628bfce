# core/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class LanguageCategory(str, Enum):
    """Project languages that have a shared-code directory."""
    CPP    = "Cpp"
    RUST   = "Rust"
    PYTHON = "Python"
    RUBY   = "Ruby"
    CSHARP = "CSharp"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, name: str) -> Optional["LanguageCategory"]:
        """Look up a category by value or member name, case-insensitively."""
        wanted = name.strip().lower()
        for cat in cls:
            if wanted in (cat.value.lower(), cat.name.lower()):
                return cat
        return None


class MarkerKind(str, Enum):
    EXACT_NAME = "name"
    EXTENSION  = "extension"


@dataclass(frozen=True)
class Marker:
    kind: MarkerKind
    value: str

    @classmethod
    def name(cls, value: str) -> "Marker":
        return cls(MarkerKind.EXACT_NAME, value)

    @classmethod
    def ext(cls, value: str) -> "Marker":
        return cls(MarkerKind.EXTENSION, value)

    @property
    def is_extension(self) -> bool:
        return self.kind is MarkerKind.EXTENSION

    def __str__(self):
        return f".{self.value}" if self.is_extension else self.value


@dataclass(frozen=True)
class LanguageProfile:
    """One row of the marker table."""
    category: LanguageCategory
    directory: str                 # sub-directory under the shared-code root
    markers: Tuple[Marker, ...]


@dataclass(frozen=True)
class Match:
    """Why a directory was classified the way it was."""
    category: LanguageCategory
    marker: Marker
    entry: Optional[str] = None    # None when the hit came from the root listing itself

    def describe(self) -> str:
        where = f" via '{self.entry}'" if self.entry else ""
        if self.marker.is_extension:
            return f"found *{self.marker}{where}"
        return f"found {self.marker}"
