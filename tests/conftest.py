"""Shared pytest configuration."""

import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def _isolated_project_home(tmp_path_factory):
    """Keep log files and SQLite databases out of the working tree."""
    os.environ["FUNDIFY_HOME"] = str(tmp_path_factory.mktemp("fundify_home"))
    os.environ.pop("FUNDIFY_STORE", None)
    os.environ.pop("FUNDIFY_DB_URL", None)
