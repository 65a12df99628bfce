# core/copier.py
import os
from dataclasses import dataclass
from typing import List

from utils.common import run_captured
from .exceptions import CopyExecutionError, SharedCodeNotFoundError, WrongPathTypeError


@dataclass
class CopyResult:
    command: List[str]
    returncode: int
    stdout: str
    stderr: str


def check_shared_file(path: str) -> str:
    """
    Make sure `path` is an existing regular file and return it.

    Raises:
        SharedCodeNotFoundError: nothing exists at `path`
        WrongPathTypeError: `path` is a directory or something other than a file
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        raise SharedCodeNotFoundError(
            f"Shared code not found: {path}", context={"path": path}
        )
    except OSError as e:
        raise SharedCodeNotFoundError(
            f"Cannot access {path}: {e.strerror or e}", context={"path": path}
        )

    if os.path.isdir(path):
        raise WrongPathTypeError(
            f"Path exists but is a directory, not a file: {path}", context={"path": path}
        )
    if not os.path.isfile(path):
        raise WrongPathTypeError(
            f"Path exists but is neither file nor directory: {path}",
            context={"path": path, "mode": oct(st.st_mode)}
        )
    return path


def copy_into_cwd(source: str, copy_command: List[str], dest: str = ".") -> CopyResult:
    """
    Run `copy_command + [source, dest]` and capture what it prints.

    The command's exit status is reported back but not judged; only a
    failure to launch it raises.
    """
    cmd = list(copy_command) + [source, dest]
    try:
        res = run_captured(cmd)
    except OSError as e:
        raise CopyExecutionError(
            f"Failed to run {cmd[0]}: {e.strerror or e}",
            context={"command": " ".join(cmd)}
        )
    return CopyResult(command=cmd, returncode=res.returncode,
                      stdout=res.stdout or "", stderr=res.stderr or "")
