from __future__ import annotations

from enum import Enum

import pytest

from switchargs import ArgumentsBuilder


class Numbers(Enum):
    one = 0
    two = 1
    three = 2


class FakeFileSystem:
    """In-memory stand-in for LocalFileSystem"""

    def __init__(self, files=(), directories=()):
        self.files = set(files)
        self.directories = set(directories)

    def file_exists(self, path):
        return path in self.files

    def directory_exists(self, path):
        return path in self.directories


@pytest.fixture
def builder() -> ArgumentsBuilder:
    return ArgumentsBuilder(argument_source=lambda: [])


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem(files={"./app.dll"}, directories={"./", "./data"})


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Temporary working directory holding ./x.dll and ./sub/"""
    (tmp_path / "x.dll").write_bytes(b"")
    (tmp_path / "sub").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path
