# todo_service/core/logging.py
"""
Scope-tagged console logging for the Todo service.

Only INFO_SCOPES are printed by default.
Set DEBUG=true to see every scope.
"""
import os
import sys
from datetime import datetime
from typing import Any, Optional

INFO_SCOPES = {
    "STARTUP",  # Process lifecycle
    "DB",       # Store connection and failures
    "TODOS",    # Request handling
    "HTTP",     # Middleware registration
}

# DEBUG-only scopes (hidden by default)
DEBUG_SCOPES = {
    "ROUTES",
    "CONFIG",
}

DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"


def set_debug(enabled: bool) -> None:
    """Toggle DEBUG-scope output at runtime (used when settings are loaded)."""
    global DEBUG_MODE
    DEBUG_MODE = enabled


def log(scope: str, message: str, data: Any = None) -> None:
    """
    Unified logging function for the Todo service.
    """
    if not DEBUG_MODE and scope not in INFO_SCOPES:
        return

    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [{scope}] {message}")

    if data:
        print(f"  Data: {data}")

    sys.stdout.flush()


def log_section(scope: str, title: str, subtitle: Optional[str] = None) -> None:
    """
    Log a section header with visual separator.
    """
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"\n{'='*60}")
    print(f"[{timestamp}] [{scope}] {title}")
    if subtitle:
        print(f"  {subtitle}")
    print(f"{'='*60}")
    sys.stdout.flush()
