from datetime import datetime
from typing import Any

import pytest
from fastapi.testclient import TestClient

from shelfgraph.api import create_app
from shelfgraph.domain.book import BookNode
from shelfgraph.engine import AnalysisEngine
from shelfgraph.graph.normalizer import AttributeNormalizer
from tests.fakes import FIXED_NOW, FakeClock, FakeRandomSource


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def never_resonate() -> FakeRandomSource:
    """Random source whose draws never fall under the resonance probability."""
    return FakeRandomSource([0.99])


@pytest.fixture
def always_resonate() -> FakeRandomSource:
    return FakeRandomSource([0.0])


@pytest.fixture
def sample_records() -> list[Any]:
    return [
        {
            "id": "neuromancer",
            "title": "Neuromancer",
            "author": "William Gibson",
            "tags": ["Cyberpunk", "Artificial Intelligence", "Identity"],
            "publicationYear": 1984,
            "createdAt": "2024-01-05T10:00:00Z",
        },
        {
            "id": "count-zero",
            "title": "Count Zero",
            "author": "William Gibson",
            "tags": ["Cyberpunk", "Artificial Intelligence"],
            "publicationYear": 1986,
            "createdAt": "2024-02-10T10:00:00Z",
        },
        {
            "id": "left-hand",
            "title": "The Left Hand of Darkness",
            "author": "Ursula K. Le Guin",
            "tags": ["Gender", "Identity"],
            "publicationYear": 1969,
            "createdAt": "2024-03-01T10:00:00Z",
        },
        {
            "id": "dispossessed",
            "title": "The Dispossessed",
            "author": "Ursula K. Le Guin",
            "tags": ["Anarchism", "Utopia"],
            "publicationYear": 1974,
            "createdAt": "2024-04-20T10:00:00Z",
        },
        {
            "id": "darkness-visible",
            "title": "Darkness Visible",
            "author": "",
            "tags": "not-a-list",
            "createdAt": "2024-05-25T10:00:00Z",
        },
        {"title": "No identifier at all", "author": "Nobody"},
    ]


@pytest.fixture
def sample_nodes(sample_records: list[Any]) -> list[BookNode]:
    nodes, _ = AttributeNormalizer().normalize_records(sample_records)
    return nodes


@pytest.fixture
def engine(never_resonate: FakeRandomSource, fixed_now: datetime) -> AnalysisEngine:
    return AnalysisEngine(rng=never_resonate, clock=FakeClock(fixed_now))


@pytest.fixture
def test_client(engine: AnalysisEngine) -> TestClient:
    """Create test client around an engine with fake randomness and time."""
    return TestClient(create_app(engine=engine))
