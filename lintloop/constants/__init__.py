"""Constants module for lintloop.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (capacities, layout reservations)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in the lintloop.keyboard module.
"""

from lintloop.constants.defaults import (
    CODE_LANGUAGE_DEFAULT,
    FILE_EXTENSION_DEFAULT,
    LINT_COMMAND_DEFAULT,
    MAX_RETRIES_DEFAULT,
    MODEL_DEFAULT,
    OLLAMA_URL_DEFAULT,
)
from lintloop.constants.enums import (
    EventKind,
    InputMode,
    ItemKind,
    Outcome,
)
from lintloop.constants.limits import (
    EVENT_QUEUE_CAPACITY,
    SHORT_PATH_MAX,
)
from lintloop.constants.timeouts import (
    LINT_COMMAND_TIMEOUT,
    PATCH_REQUEST_TIMEOUT,
    WORKER_DEADLINE_SECONDS,
)
from lintloop.constants.values import (
    APP_TITLE,
    FILEPATH_PLACEHOLDER,
    STATUS_FAILED,
    STATUS_FIXED,
    STATUS_PENDING,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Defaults
    "CODE_LANGUAGE_DEFAULT",
    "EVENT_QUEUE_CAPACITY",
    "FILEPATH_PLACEHOLDER",
    "FILE_EXTENSION_DEFAULT",
    "LINT_COMMAND_DEFAULT",
    # Timeouts
    "LINT_COMMAND_TIMEOUT",
    "MAX_RETRIES_DEFAULT",
    "MODEL_DEFAULT",
    "OLLAMA_URL_DEFAULT",
    "PATCH_REQUEST_TIMEOUT",
    "SHORT_PATH_MAX",
    # Status labels
    "STATUS_FAILED",
    "STATUS_FIXED",
    "STATUS_PENDING",
    "WORKER_DEADLINE_SECONDS",
    # Enums
    "EventKind",
    "InputMode",
    "ItemKind",
    "Outcome",
]
