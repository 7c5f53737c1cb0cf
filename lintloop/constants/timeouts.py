"""Timeout constants.

All timeout values (seconds) for worker deadlines, subprocesses and HTTP calls.
"""

from typing import Final

# ============================================================================
# Worker timeouts
# ============================================================================

# Wall-clock budget for one file's whole fix loop.
WORKER_DEADLINE_SECONDS: Final = 300.0

# ============================================================================
# Collaborator timeouts
# ============================================================================

# Must stay below the worker deadline so one hung lint run cannot eat it whole.
LINT_COMMAND_TIMEOUT: Final = 120.0
PATCH_REQUEST_TIMEOUT: Final = 120.0

__all__ = [
    "LINT_COMMAND_TIMEOUT",
    "PATCH_REQUEST_TIMEOUT",
    "WORKER_DEADLINE_SECONDS",
]
