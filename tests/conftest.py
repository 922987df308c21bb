from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


@pytest.fixture
def blog_text() -> str:
    return load_fixture("blog_sample.txt")


@pytest.fixture
def listing_text() -> str:
    return load_fixture("listing_sample.txt")
