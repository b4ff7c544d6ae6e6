import tempfile

import pytest


@pytest.fixture
def temp_area(monkeypatch, tmp_path):
    """Point ``tempfile`` at a private directory so leftovers can be counted."""

    area = tmp_path / "temp-area"
    area.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(area))
    return area
