# core/config.py
import os
from typing import Dict, List, Optional

from utils.common import CONFIG_ENV, ROOT_ENV, default_config_path, platform_copy_command
from .exceptions import UsageError
from .languages import default_directories, lookup_category
from .models import LanguageCategory
from .validation import ConfigValidator, SharecodeConfig


class Config:
    def __init__(self, data: SharecodeConfig, source: Optional[str] = None,
                 root_override: Optional[str] = None):
        self.source          = source

        # --root beats $SHARECODE_ROOT beats the file
        root = root_override or os.environ.get(ROOT_ENV) or data.shared_root
        self.shared_root     = os.path.abspath(os.path.expanduser(root))

        self.directories: Dict[LanguageCategory, str] = default_directories()
        for name, directory in data.directories.items():
            self.directories[lookup_category(name)] = directory

        self.copy_command: List[str] = list(data.copy_command or platform_copy_command())

        self.follow_symlinks = data.follow_symlinks
        self.max_depth       = data.max_depth

    @classmethod
    def load(cls, config_path: Optional[str] = None, root_override: Optional[str] = None):
        """
        Build the runtime config.

        An explicit path (argument or $SHARECODE_CONFIG) must exist; the
        default location is optional and falls back to built-in defaults.
        """
        explicit = config_path or os.environ.get(CONFIG_ENV)
        path = explicit or default_config_path()

        validator = ConfigValidator()
        if explicit or os.path.isfile(path):
            data = validator.validate_config_file(path)
            return cls(data, source=path, root_override=root_override)
        return cls(SharecodeConfig(), source=None, root_override=root_override)

    @property
    def scan_options(self) -> dict:
        return {"follow_symlinks": self.follow_symlinks, "max_depth": self.max_depth}

    def language_root(self, category: LanguageCategory) -> str:
        return os.path.join(self.shared_root, self.directories[category])

    def shared_path(self, category: LanguageCategory, relative: str) -> str:
        """
        <shared_root>/<language dir>/<relative>

        Raises:
            UsageError: `relative` is absolute or climbs out of the language directory
        """
        base = os.path.normpath(self.language_root(category))
        if os.path.isabs(relative) or os.path.splitdrive(relative)[0]:
            raise UsageError(
                f"Shared-code path must be relative to {base}: {relative}"
            )
        path = os.path.normpath(os.path.join(base, relative))
        if os.path.commonpath([base, path]) != base:
            raise UsageError(
                f"Shared-code path leaves {base}: {relative}"
            )
        return path
