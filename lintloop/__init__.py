"""lintloop - lint, diagnose, patch, re-lint with a live terminal dashboard."""

__version__ = "0.3.0"
