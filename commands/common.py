import os
from typing import Optional

from core.classifier import LanguageClassifier
from core.config import Config
from core.exceptions import ClassificationError, UsageError
from core.languages import LANGUAGE_TABLE, lookup_category
from core.logger import ComponentLogger
from core.models import LanguageCategory


def known_languages() -> str:
    return ", ".join(f"{p.category.value} ({p.directory})" for p in LANGUAGE_TABLE)


def resolve_language(cfg: Config, log: ComponentLogger,
                     language: Optional[str] = None,
                     project_dir: str = ".") -> LanguageCategory:
    """
    Pick the language for `project_dir`: the explicit `language` if given,
    otherwise whatever the classifier finds.

    Raises:
        UsageError: `language` isn't a known category
        ScanError: `project_dir` can't be read
        ClassificationError: nothing in `project_dir` looks like a known language
    """
    if language:
        cat = lookup_category(language)
        if cat is None:
            raise UsageError(
                f"Unknown language '{language}'. Known: {known_languages()}"
            )
        log.debug(f"language forced to {cat}")
        return cat

    classifier = LanguageClassifier(project_dir, **cfg.scan_options)
    hit = classifier.explain()
    if hit is None:
        raise ClassificationError(
            "There are no files or directories identifiable as a specific "
            "language in the current directory.",
            context={"path": os.path.abspath(project_dir)}
        )
    log.debug(f"{hit.category}: {hit.describe()}")
    return hit.category
