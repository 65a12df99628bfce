# utils/common.py

import os
import platform
import subprocess
from typing import List

CONFIG_ENV = "SHARECODE_CONFIG"
ROOT_ENV   = "SHARECODE_ROOT"


def default_config_path() -> str:
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base, "sharecode", "config.yaml")


def platform_copy_command() -> List[str]:
    """Copy command for this platform; source and destination get appended."""
    if platform.system() == "Windows":
        return ["powershell", "-Command", "cp"]
    return ["cp"]


def run_captured(cmd: List[str]) -> subprocess.CompletedProcess:
    """Run `cmd` without a shell and capture its output as text."""
    return subprocess.run(cmd, capture_output=True, text=True, errors="replace")
