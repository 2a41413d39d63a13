from __future__ import annotations
from pathlib import Path

import pytest

LSTREE_ENV = [
    "LSTREE_CONFIG", "LSTREE_LOG_LEVEL", "LOG_LEVEL", "LSTREE_X_SPACING",
    "LSTREE_Y_SPACING", "LSTREE_SORT", "LSTREE_IGNORE", "LSTREE_COUNT_ROOT",
]


def make_tree(base: Path, spec: dict) -> Path:
    """
    Build a directory tree from a nested dict:
      {"a.txt": "", "sub": {"b.txt": "hello"}}
    str values are files, dict values are directories.
    """
    base.mkdir(parents=True, exist_ok=True)
    for name, value in spec.items():
        target = base / name
        if isinstance(value, dict):
            make_tree(target, value)
        else:
            target.write_text(value, encoding="utf-8")
    return base


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in LSTREE_ENV:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """tmp_path as the current directory, so relative root names print short."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def docs_tree(workdir) -> Path:
    return make_tree(workdir / "docs", {"a.txt": "", "sub": {"b.txt": ""}})


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    import logging
    from lstree.utils.log import LOGGER_NAME, _StderrHandler

    lg = logging.getLogger(LOGGER_NAME)
    for h in list(lg.handlers):
        if isinstance(h, _StderrHandler):
            lg.removeHandler(h)
    lg.setLevel(logging.NOTSET)
