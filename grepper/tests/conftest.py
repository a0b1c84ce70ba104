import os
import sys
from pathlib import Path

import django
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "grepper.settings")
django.setup()


@pytest.fixture
def write_file(tmp_path):
    """Create a text file under tmp_path and return its path as str."""
    def _write(name, content):
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")
        return str(p)
    return _write
