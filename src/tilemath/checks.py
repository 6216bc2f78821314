"""Debug-only precondition checks.

Callers of the tile constructors are responsible for passing valid input.
The checks run only in debug runs and are skipped entirely when Python runs
with ``-O``. A violated precondition is a programming error: it raises
``AssertionError`` and is never turned into a recoverable error.

The checks follow the ``check_preconditions`` setting of the active
environment. Assigning ``ENABLED`` overrides the setting; ``None`` defers
to it again.
"""
from contextlib import contextmanager

from . import config

ENABLED = None


def enabled():
    """Return whether precondition checks currently run."""
    if not __debug__:
        return False
    if ENABLED is None:
        return config.check_preconditions()
    return ENABLED


def require(condition, message):
    """Assert ``condition`` when precondition checks are enabled."""
    if __debug__ and enabled():
        assert condition, message


@contextmanager
def unchecked():
    """Temporarily disable precondition checks."""
    global ENABLED
    previous = ENABLED
    ENABLED = False
    try:
        yield
    finally:
        ENABLED = previous
