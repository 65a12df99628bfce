#!/usr/bin/env python3
"""
Print the language detected for a directory without copying anything.
"""

import os
from typing import Optional

from core.config import Config
from core.logger import ComponentLogger
from commands.common import resolve_language


def detect_main(project_dir: str = ".", config_path: Optional[str] = None,
                root: Optional[str] = None,
                verbose: bool = False) -> int:
    log = ComponentLogger("detect", verbose=verbose)
    cfg = Config.load(config_path, root_override=root)

    log.debug(f"scanning {os.path.abspath(project_dir)}")
    category = resolve_language(cfg, log, project_dir=project_dir)

    log.info(f"current language_type: {category}")
    log.info(f"shared code directory: {cfg.language_root(category)}")
    return 0
