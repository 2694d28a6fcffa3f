"""Shared test fixtures."""

from pathlib import Path

import pytest

from docs_browser.client.router import ClientRouter
from tests.unit.fakes import FakeView, LocalApi, ManualScheduler, MemoryStore

CORPUS = {
    "guides/intro.md": "# Introduction\n\nWelcome to FooBar.\nSecond line\n",
    "guides/setup.md": (
        "# Setup\n\n"
        "  FooBar thing\n\n"
        "```python\nprint('hi')\n```\n\n"
        "Previous: [Intro](/guides/intro)\n"
    ),
    "guides/advanced/tips.md": "# Tips\n\nSee [setup](/guides/setup) first.\n",
    "reference/a1.md": "# A1\n",
    "reference/a2.md": "# A2\n",
    "reference/a10.md": "# A10\n",
    "README.md": "No heading in this file.\n",
    "notes.txt": "FooBar in a text file is ignored\n",
}


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """Return a small corpus with two categories, an empty one and a stray file."""
    root = tmp_path / "docs"
    for rel, text in CORPUS.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    (root / "empty").mkdir()
    return root


@pytest.fixture
def api(docs_root: Path) -> LocalApi:
    return LocalApi(docs_root)


@pytest.fixture
def view() -> FakeView:
    return FakeView()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def router(
    api: LocalApi, view: FakeView, store: MemoryStore, scheduler: ManualScheduler
) -> ClientRouter:
    """A wide-viewport router with navigation already loaded."""
    r = ClientRouter(api, view, store, scheduler, viewport_width=1280)
    r.start()
    return r
