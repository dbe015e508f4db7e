from pathlib import Path

import pytest

from localesetup.paths import LocalePaths


@pytest.fixture()
def root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.delenv('container', raising=False)
    return tmp_path


@pytest.fixture()
def write(root: Path):
    def _write(rel: str, text: str) -> Path:
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding='utf-8')
        return p

    return _write


@pytest.fixture()
def paths(root: Path) -> LocalePaths:
    return LocalePaths(root)
