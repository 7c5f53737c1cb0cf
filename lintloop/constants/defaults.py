"""Default values for settings.

All default values used in the FixerSettings model and CLI option fallbacks.
"""

from typing import Final

# ============================================================================
# Discovery defaults
# ============================================================================

ROOT_DIR_DEFAULT: Final = "."
FILE_EXTENSION_DEFAULT: Final = ".go"
CODE_LANGUAGE_DEFAULT: Final = "go"
CONFIG_FILE_DEFAULT: Final = ".lintloop.yaml"

# ============================================================================
# Fix loop defaults
# ============================================================================

MAX_RETRIES_DEFAULT: Final = 5
LINT_COMMAND_DEFAULT: Final = "golangci-lint run {{filepath}}"

# ============================================================================
# Patch service defaults
# ============================================================================

OLLAMA_URL_DEFAULT: Final = "http://localhost:11434"
MODEL_DEFAULT: Final = "deepseek-coder-v2"
STREAM_DEFAULT: Final = False

__all__ = [
    "CODE_LANGUAGE_DEFAULT",
    "CONFIG_FILE_DEFAULT",
    "FILE_EXTENSION_DEFAULT",
    "LINT_COMMAND_DEFAULT",
    "MAX_RETRIES_DEFAULT",
    "MODEL_DEFAULT",
    "OLLAMA_URL_DEFAULT",
    "ROOT_DIR_DEFAULT",
    "STREAM_DEFAULT",
]
