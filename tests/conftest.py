"""Shared fixtures for request-options tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from openasset_rest import RestOptions

from .nouns import File


@pytest.fixture
def options() -> RestOptions[File]:
    return RestOptions(File)


@pytest.fixture
def make_file():
    def _make(updated: datetime, **data: object) -> File:
        return File(updated=updated, **data)

    return _make
