"""Verbose logger for Tripatlas."""

from typing import Any
from rich.console import Console

# Global instances; diagnostics go to stderr so JSON output stays clean
_console = Console(stderr=True)
_verbose = False


def set_verbose(enabled: bool) -> None:
    """Turn verbose mode on or off."""
    global _verbose
    _verbose = enabled


def is_verbose() -> bool:
    """Return whether verbose mode is on."""
    return _verbose


def _shorten(value: str, limit: int) -> str:
    if len(value) > limit:
        return value[: limit - 3] + "..."
    return value


def log_call(service: str, method: str, **kwargs: Any) -> None:
    """Log a service call with its parameters.

    Args:
        service: Service name (e.g. "PhotoClusterer")
        method: Method name (e.g. "cluster")
        **kwargs: Call parameters, None values are skipped
    """
    if not _verbose:
        return

    params = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append(f"{key}={_shorten(str(value), 50)}")

    params_str = ", ".join(params)
    _console.print(f"  [dim]→ {service}.{method}({params_str})[/dim]", highlight=False)


def log_result(service: str, method: str, result: Any) -> None:
    """Log the result of a service call.

    Args:
        service: Service name
        method: Method name
        result: Call result
    """
    if not _verbose:
        return

    _console.print(f"  [dim]← {service}.{method} = {_shorten(str(result), 80)}[/dim]", highlight=False)


def log_info(message: str) -> None:
    """Log an informational message (verbose only)."""
    if _verbose:
        _console.print(f"  [dim]{message}[/dim]", highlight=False)


def log_warning(message: str) -> None:
    """Log a warning. Warnings are always printed."""
    _console.print(f"  [yellow]⚠ {message}[/yellow]", highlight=False)
