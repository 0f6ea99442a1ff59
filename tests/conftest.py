import sys
from pathlib import Path

import pytest

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'flagpr' and tests/ importable as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


@pytest.fixture
def ui():
    from helpers.fakes import FakeInteraction

    return FakeInteraction()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project root that looks like a git checkout with one JSON config."""
    root = tmp_path / "project"
    root.mkdir()
    (root / ".git").mkdir()
    (root / "app-config.json").write_text('{"volumeQuotaFlag": true, "name": "svc"}', encoding="utf-8")
    return root
