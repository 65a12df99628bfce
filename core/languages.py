# core/languages.py
"""
Static marker table.

Categories are tested top to bottom and markers left to right; the first
marker found wins, so the order here is the precedence order.
"""

from typing import Dict, Optional, Tuple

from .models import LanguageCategory, LanguageProfile, Marker

N, E = Marker.name, Marker.ext

LANGUAGE_TABLE: Tuple[LanguageProfile, ...] = (
    LanguageProfile(
        LanguageCategory.CPP, "c-cpp",
        (N("CMakeLists.txt"), N("Makefile"),
         E("c"), E("cc"), E("cpp"), E("h"), E("hh"), E("hpp")),
    ),
    LanguageProfile(
        LanguageCategory.RUST, "rs",
        (N("Cargo.toml"), N("Cargo.lock"), E("rs")),
    ),
    LanguageProfile(
        LanguageCategory.PYTHON, "py",
        (N("__init__.py"), N("setup.py"), N("requirements.txt"),
         N("venv"), N("virtualenv"), E("py")),
    ),
    LanguageProfile(
        LanguageCategory.RUBY, "rb",
        (N("Gemfile"), N("Gemfile.lock"), N("Rakefile"), E("rb")),
    ),
    LanguageProfile(
        LanguageCategory.CSHARP, "c#",
        (N("Properties"), N("App.config"), N("Web.config"), E("csproj"), E("cs")),
    ),
)


def default_directories() -> Dict[LanguageCategory, str]:
    return {p.category: p.directory for p in LANGUAGE_TABLE}


def lookup_category(name: str) -> Optional[LanguageCategory]:
    """Resolve a category from its name ('rust') or its directory ('rs')."""
    cat = LanguageCategory.parse(name)
    if cat is not None:
        return cat
    for p in LANGUAGE_TABLE:
        if p.directory.lower() == name.strip().lower():
            return p.category
    return None
