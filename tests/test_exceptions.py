"""Tests for the exception hierarchy."""

from __future__ import annotations

import unittest

from eventobject.exceptions import (
    ConfigValidationError,
    EventObjectError,
    InvalidEventConstructionError,
)


class ExceptionHierarchyTests(unittest.TestCase):
    """Validate exception inheritance contract."""

    def test_exception_hierarchy(self) -> None:
        self.assertTrue(issubclass(EventObjectError, RuntimeError))
        self.assertTrue(issubclass(InvalidEventConstructionError, EventObjectError))
        self.assertTrue(issubclass(InvalidEventConstructionError, ValueError))
        self.assertTrue(issubclass(ConfigValidationError, EventObjectError))


if __name__ == "__main__":
    unittest.main()
