"""
Colored console logging with a bracketed command prefix.
"""

import sys
from colorama import Fore, Style


class ComponentLogger:
    """Logger that prefixes all output with a colored name, e.g. [fetch]."""

    COLORS = {
        "sharecode": Fore.CYAN,
        "detect":    Fore.BLUE,
        "fetch":     Fore.MAGENTA,
    }

    def __init__(self, name: str = "sharecode", verbose: bool = False):
        self.name = name
        self.verbose = verbose
        color = self.COLORS.get(name, Fore.CYAN)
        self.prefix = f"{color}[{name}]{Style.RESET_ALL} "

    def log(self, message: str, file=None):
        """Log a message with the prefix, one line at a time."""
        file = file or sys.stdout
        for line in message.splitlines() or [""]:
            print(f"{self.prefix}{line}", file=file)

    def info(self, message: str):
        self.log(message)

    def debug(self, message: str):
        if self.verbose:
            self.log(f"{Style.DIM}{message}{Style.RESET_ALL}")

    def warning(self, message: str):
        self.log(f"{Fore.YELLOW}WARNING:{Style.RESET_ALL} {message}", file=sys.stderr)

    def error(self, message: str):
        self.log(f"{Fore.RED}ERROR:{Style.RESET_ALL} {message}", file=sys.stderr)

    def success(self, message: str):
        self.log(f"{Fore.GREEN}✓{Style.RESET_ALL} {message}")

    @staticmethod
    def passthrough(stdout: str, stderr: str):
        """Relay another program's output untouched."""
        if stdout:
            sys.stdout.write(stdout)
            sys.stdout.flush()
        if stderr:
            sys.stderr.write(stderr)
            sys.stderr.flush()
