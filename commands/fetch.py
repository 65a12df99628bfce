#!/usr/bin/env python3
"""
Copy a shared-code file for the project's language into the project
directory (the current directory unless -C says otherwise).
"""

import os
from typing import Optional

from core.config import Config
from core.copier import check_shared_file, copy_into_cwd
from core.logger import ComponentLogger
from commands.common import resolve_language


def fetch_main(shared_code_path: str,
               config_path: Optional[str] = None,
               root: Optional[str] = None,
               language: Optional[str] = None,
               project_dir: str = ".",
               verbose: bool = False) -> int:
    """
    Detect the language of `project_dir` and copy
    <shared_root>/<language dir>/<shared_code_path> into it.

    Args:
        shared_code_path: file path relative to the language directory
        config_path: optional YAML config file
        root: shared-code root, overrides the config
        language: skip detection and use this language
        project_dir: project to classify and copy into (default: cwd)

    Returns:
        Exit code (0 once the copy command ran)
    """
    log = ComponentLogger("fetch", verbose=verbose)
    cfg = Config.load(config_path, root_override=root)
    if cfg.source:
        log.debug(f"config: {cfg.source}")
    log.debug(f"shared root: {cfg.shared_root}")

    category = resolve_language(cfg, log, language=language, project_dir=project_dir)
    log.info(f"current language_type: {category}")

    path = check_shared_file(cfg.shared_path(category, shared_code_path))
    log.info(f"The specified path exists: {path}")

    target = os.path.join(project_dir, os.path.basename(path))
    if os.path.exists(target):
        log.warning(f"overwriting {target}")

    res = copy_into_cwd(path, cfg.copy_command, dest=project_dir)
    log.debug(f"$ {' '.join(res.command)}")
    log.passthrough(res.stdout, res.stderr)
    if res.returncode == 0:
        log.success(f"copied {os.path.basename(path)} into {project_dir}")
    else:
        log.warning(f"{res.command[0]} exited with status {res.returncode}")
    return 0
