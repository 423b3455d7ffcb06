"""Tests for showcase/process.py."""

from unittest.mock import MagicMock, patch

from showcase.process import is_child, process_role


def test_test_runner_is_parent():
    assert is_child() is False
    assert process_role() == "parent"


def test_spawned_worker_is_child():
    with patch("showcase.process.multiprocessing.parent_process", return_value=MagicMock()):
        assert is_child() is True
        assert process_role() == "child"
