import os

import pytest

from siteindex import scanner

NOW = "2024-01-01T00:00:00.000Z"


def touch(path, data="<html></html>"):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(data)


def read(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def site(tmp_path):
    "alpha/ with two pages, beta/ empty, plus things that must be ignored"
    webapps = tmp_path / "webapps"
    touch(str(webapps / "alpha" / "b.html"))
    touch(str(webapps / "alpha" / "a.htm"))
    touch(str(webapps / "alpha" / "notes.txt"))
    os.makedirs(str(webapps / "beta"))
    os.makedirs(str(webapps / ".git"))
    touch(str(webapps / "stray.html"))
    return tmp_path


@pytest.fixture(autouse=True)
def default_collation():
    scanner.use_default_collation()
    yield
    scanner.use_default_collation()
