"""Process role detection for the prefork model."""

import multiprocessing


def is_child() -> bool:
    """Return True inside a worker spawned by the prefork supervisor."""
    return multiprocessing.parent_process() is not None


def process_role() -> str:
    """Return "child" for prefork workers and "parent" otherwise."""
    return "child" if is_child() else "parent"
