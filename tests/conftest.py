"""Pytest configuration and shared fixtures for dotprops tests."""

import tempfile
from pathlib import Path
from textwrap import dedent
from typing import Iterator

import pytest

from dotprops import PropertiesParser

VALID_CONFIGURATION = dedent("""\
    # test configuration file

    source = some source
    destination = some destination # with comment
    bind_port = 9345

    [section1]
    float = 4.5
    bool.true = yes
    bool.false = 0
    """)

INVALID_CONFIGURATION = dedent("""\
    # test configuration
    this is an invalid line
    this_is = valid one
    """)


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def parser() -> PropertiesParser:
    """Create a basic PropertiesParser instance."""
    return PropertiesParser()


@pytest.fixture
def strict_parser() -> PropertiesParser:
    """Create a PropertiesParser rejecting keys with empty segments."""
    return PropertiesParser(strict_keys=True)


def write_properties_file(file_path: Path, text: str) -> None:
    """Write properties text to a file.

    Args:
        file_path: Path to write file
        text: Properties text to write
    """
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(text)
