"""Scalar constants.

All application-level string constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "lintloop"
APP_DESCRIPTION: Final = "Lint, patch and re-lint source files with a live dashboard."

# ============================================================================
# Lint command template
# ============================================================================

FILEPATH_PLACEHOLDER: Final = "{{filepath}}"

# ============================================================================
# Patch service
# ============================================================================

GENERATE_ENDPOINT: Final = "/api/generate"

# ============================================================================
# File status labels
# ============================================================================

STATUS_PENDING: Final = "Pending"
STATUS_FIXED: Final = "Fixed"
STATUS_FAILED: Final = "Failed"
STATUS_ATTEMPT_TEMPLATE: Final = "Attempt {attempt}/{total}"

# ============================================================================
# Worker log lines
# ============================================================================

LOG_LINT_PASSED: Final = "Lint passed"
LOG_LINT_ERRORS_PREFIX: Final = "Lint errors:"
LOG_FIX_APPLIED: Final = "Applied AI fix"
LOG_FIX_ERROR_PREFIX: Final = "Fix error:"

__all__ = [
    "APP_DESCRIPTION",
    "APP_TITLE",
    "FILEPATH_PLACEHOLDER",
    "GENERATE_ENDPOINT",
    "LOG_FIX_APPLIED",
    "LOG_FIX_ERROR_PREFIX",
    "LOG_LINT_ERRORS_PREFIX",
    "LOG_LINT_PASSED",
    "STATUS_ATTEMPT_TEMPLATE",
    "STATUS_FAILED",
    "STATUS_FIXED",
    "STATUS_PENDING",
]
