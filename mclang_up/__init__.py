"""MCLang toolchain installer/updater.

Core design goals:
- Every external tool call goes through one runner
- First failure aborts the whole run
- Declarative component manifest
- Centralized logging
"""

__version__ = "0.1.0"

__all__ = []
