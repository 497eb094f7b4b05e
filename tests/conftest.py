"""Shared test fixtures for cast-diff tests."""

import io
import json
import logging
from pathlib import Path

import pytest

CASTS_DIR = Path(__file__).parent / "fixtures" / "casts"


def build_cast(header, events) -> bytes:
    """Serialize a header and a list of (seconds, type, data) events as a cast."""
    lines = [json.dumps(header)]
    lines.extend(json.dumps(list(event)) for event in events)
    return ("\n".join(lines) + "\n").encode("utf-8")


@pytest.fixture
def casts_dir():
    """Directory holding the sample cast files."""
    return CASTS_DIR


@pytest.fixture
def open_cast():
    """Open a sample cast in binary mode; closed after the test."""
    handles = []

    def _open(name):
        f = open(CASTS_DIR / name, "rb")
        handles.append(f)
        return f

    yield _open
    for f in handles:
        f.close()


@pytest.fixture
def make_cast():
    """Build an in-memory cast stream from a header and events."""

    def _make(header=None, events=()):
        if header is None:
            header = {"version": 2, "width": 80, "height": 24}
        return io.BytesIO(build_cast(header, events))

    return _make


@pytest.fixture
def header():
    """A typical asciinema v2 header."""
    return {
        "version": 2,
        "width": 80,
        "height": 24,
        "timestamp": 1600000000,
        "env": {"SHELL": "/bin/bash", "TERM": "xterm-256color"},
    }


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers and level set on the cast_diff logger by a test."""
    logger = logging.getLogger("cast_diff")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
