"""
Unified logging for listserial.

Console output for info, warnings and errors, with an optional session log
file. Tracks warnings and errors for an end-of-session summary.

Usage:
    from listserial.utils import log, logWarning, logError, logDebug, init_logging, print_summary

    # Optional, enables the session log file (debug messages go only there):
    init_logging(Path("listserial.log"))

    log("Copying 3 lists...")                 # Info - major points
    logWarning("duplicate link id 4")         # Stream is odd but still usable
    logError("stream is corrupt")             # Operation failed
    logDebug("encoded 12 nodes, 210 bytes")   # Only written to the log file

    # At end:
    print_summary()  # Shows warning/error counts

Codecs run on worker threads, so module state is guarded by a lock.
"""

import sys
import threading
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Tuple

# ANSI color codes
class Colors:
    YELLOW = '\033[93m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


# Module state
_lock = threading.Lock()
_log_file = None
_log_path: Optional[Path] = None
_warnings: List[str] = []
_errors: List[str] = []


def init_logging(log_path: Path):
    """
    Start writing a session log file.

    Without a call to this function nothing is written to disk and debug
    messages are dropped.

    Args:
        log_path: Path to the log file (overwritten)
    """
    global _log_file, _log_path

    close_logging()

    with _lock:
        _log_path = Path(log_path)
        _log_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            _log_file = open(_log_path, 'w', encoding='utf-8')
        except OSError as e:
            print(f"Warning: Could not open log file {_log_path}: {e}", file=sys.stderr)
            _log_file = None
            return

        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        _log_file.write(f"Session started: {timestamp}\n")
        _log_file.write("=" * 70 + "\n\n")
        _log_file.flush()


def close_logging():
    """Close the log file, if one is open."""
    global _log_file

    with _lock:
        if _log_file is None:
            return
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        _log_file.write(f"\n{'=' * 70}\n")
        _log_file.write(f"Session finished: {timestamp}\n")
        _log_file.close()
        _log_file = None


def reset_counts():
    """Forget tracked warnings and errors."""
    with _lock:
        _warnings.clear()
        _errors.clear()


def print_summary():
    """
    Print a summary of warnings and errors for the session.
    Uses colors for terminal output.
    """
    with _lock:
        errors = list(_errors)
        warnings = list(_warnings)

    log("\n" + "=" * 70)
    log("SESSION SUMMARY")
    log("=" * 70)

    if errors:
        print(f"\n{Colors.RED}{Colors.BOLD}Errors ({len(errors)}):{Colors.RESET}")
        for err in errors:
            print(f"  {Colors.RED}- {err}{Colors.RESET}")
        _write_to_file(f"\nErrors ({len(errors)}):")
        for err in errors:
            _write_to_file(f"  - {err}")

    if warnings:
        print(f"\n{Colors.YELLOW}{Colors.BOLD}Warnings ({len(warnings)}):{Colors.RESET}")
        for warn in warnings:
            print(f"  {Colors.YELLOW}- {warn}{Colors.RESET}")
        _write_to_file(f"\nWarnings ({len(warnings)}):")
        for warn in warnings:
            _write_to_file(f"  - {warn}")

    print()
    if errors:
        print(f"{Colors.RED}{Colors.BOLD}{len(errors)} Error(s){Colors.RESET}", end="")
    else:
        print(f"{Colors.GREEN}0 Errors{Colors.RESET}", end="")

    print(" | ", end="")

    if warnings:
        print(f"{Colors.YELLOW}{Colors.BOLD}{len(warnings)} Warning(s){Colors.RESET}")
    else:
        print(f"{Colors.GREEN}0 Warnings{Colors.RESET}")

    _write_to_file(f"\n{len(errors)} Error(s) | {len(warnings)} Warning(s)")


def get_counts() -> Tuple[int, int]:
    """Return (error_count, warning_count)."""
    with _lock:
        return len(_errors), len(_warnings)


def _write_to_file(msg: str, end: str = "\n"):
    """Write message to log file."""
    with _lock:
        if _log_file is not None:
            _log_file.write(msg + end)
            _log_file.flush()


def log(msg: str = "", end: str = "\n"):
    """
    Log an info message to both console and file.
    Use for major points, never per node.
    """
    print(msg, end=end)
    _write_to_file(msg, end)


def logWarning(msg: str, end: str = "\n"):
    """
    Log a warning message. Warnings mean the input was odd but still usable.
    Displayed in yellow. Tracked for the session summary.
    """
    formatted = f"Warning: {msg}"
    print(f"{Colors.YELLOW}{formatted}{Colors.RESET}", end=end)
    _write_to_file(formatted, end)
    with _lock:
        _warnings.append(msg)


def logError(msg: str, end: str = "\n"):
    """
    Log an error message. Errors mean an operation failed.
    Displayed in red. Tracked for the session summary.
    """
    formatted = f"ERROR: {msg}"
    print(f"{Colors.RED}{formatted}{Colors.RESET}", end=end, file=sys.stderr)
    _write_to_file(formatted, end)
    with _lock:
        _errors.append(msg)


def logDebug(msg: str, end: str = "\n"):
    """
    Log a debug message. Only written to the log file, not shown in console.
    """
    _write_to_file(f"[DEBUG] {msg}", end)
