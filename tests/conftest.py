import os
import tempfile
from pathlib import Path

import pytest

# Must be set before releasecheck.config is imported anywhere.
_DB_DIR = tempfile.mkdtemp(prefix="releasecheck-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{Path(_DB_DIR) / 'test.db'}")
os.environ.setdefault("GITHUB_TOKEN", "")

from releasecheck.catalog.catalog_loader import Technology

YEAR = 2024

REACT = Technology(name="React", release_year=2013, aliases=("ReactJS",), category="Frontend")
VUE = Technology(name="Vue", release_year=2014, aliases=("Vue.js",), category="Frontend")
LANGCHAIN = Technology(name="LangChain", release_year=2022, category="AI/ML")
PYTHON = Technology(name="Python", release_year=1991, category="Language")
GO = Technology(name="Go", release_year=2009, aliases=("Golang",), category="Language")
CPP = Technology(name="C++", release_year=1985, category="Language")
CSHARP = Technology(name="C#", release_year=2000, category="Language")


@pytest.fixture
def catalog():
    return [REACT, VUE, LANGCHAIN, PYTHON, GO, CPP, CSHARP]


@pytest.fixture
def bundled_catalog_path() -> Path:
    import releasecheck.catalog.catalog_loader as loader

    return Path(loader.__file__).resolve().parent / "catalog.yaml"
