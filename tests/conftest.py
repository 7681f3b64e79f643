import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo any console handler a CLI invocation installs on the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
