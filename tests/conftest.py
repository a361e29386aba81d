import random
from pathlib import Path

import pytest

from randquote import Entry, FlowState


@pytest.fixture
def site(tmp_path: Path) -> FlowState:
    """Empty data/ and html/ trees under a temporary root."""
    data = tmp_path / "data"
    html = tmp_path / "html"
    data.mkdir()
    html.mkdir()
    return FlowState(data_dir=data, html_dir=html)

@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for reproducible picks."""
    return random.Random(1234)

@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch):
    """Run the test with the temporary root as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path

def make_entry(body: str, cat_id: str = "") -> Entry:
    return Entry(body=body, cat_id=cat_id)
