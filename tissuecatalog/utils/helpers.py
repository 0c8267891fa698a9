# -*- coding: utf-8 -*-
"""Helpers , Aren't they useful ?"""

import logging
import os
import time

logger = logging.getLogger(__name__)


class ScopedTimer:
    """Log how long a block took.

    Parameters:
    -----------
    label : str
        Text logged together with the elapsed time
    """

    def __init__(self, label):
        self.label = label
        self.elapsed = 0.0
        self._start = None

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self._start
        logger.debug("%s took %.3f s", self.label, self.elapsed)
        return False


def sanitize_group_name(name):
    """Replace path separators so a tissue name can be used as a group name."""
    return name.replace("\\", "_").replace("/", "_")


def ensure_parent_dir(path):
    """Create the parent directory of a file path if there is one."""
    parent = os.path.dirname(os.fspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
