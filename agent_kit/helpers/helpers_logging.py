"""Simple console output helpers for the Agent Kit CLI."""

import os


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    CYAN = '\033[96m'  # Alias for OKCYAN
    OKGREEN = '\033[92m'
    GREEN = '\033[92m'  # Alias for OKGREEN
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def paint(color: str, msg: str) -> str:
    """Wrap ``msg`` in an ANSI color unless NO_COLOR is set."""
    if os.environ.get("NO_COLOR") is not None:
        return msg
    return f"{color}{msg}{Colors.ENDC}"


def print_header(msg: str) -> None:
    """Print a header message."""
    print(paint(f"{Colors.HEADER}{Colors.BOLD}", msg))


def print_info(msg: str) -> None:
    """Print an info message."""
    print(paint(Colors.OKCYAN, msg))


def print_success(msg: str) -> None:
    """Print a success message."""
    print(paint(Colors.OKGREEN, f"✓ {msg}"))


def print_skip(msg: str) -> None:
    """Print a skipped-step message."""
    print(paint(Colors.DIM, f"⊘ {msg}"))


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(paint(Colors.YELLOW, f"⚠️  {msg}"))


def print_error(msg: str) -> None:
    """Print an error message."""
    print(paint(Colors.RED, f"❌ {msg}"))
