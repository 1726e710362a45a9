import json

import pytest
from fastapi.testclient import TestClient

from config import settings
from main import app, limiter
from models.country import Country
from routers import countries as countries_router

SAMPLE = [
    {"name": "México", "population": 128932753, "region": "Americas",
     "capital": "Mexico City", "flag": "https://flagcdn.com/mx.svg"},
    {"name": "Monaco", "population": 39244, "region": "Europe",
     "capital": "Monaco", "flag": "https://flagcdn.com/mc.svg"},
    {"name": "Åland Islands", "population": "28875", "region": "Europe",
     "capital": "Mariehamn", "flag": "https://flagcdn.com/ax.svg"},
    {"name": "Côte d'Ivoire", "population": 26378275, "region": "Africa",
     "capital": "Yamoussoukro", "flag": "https://flagcdn.com/ci.svg"},
    {"name": "Mali", "population": 20250833, "region": "Africa",
     "capital": "Bamako", "flag": "https://flagcdn.com/ml.svg"},
]


@pytest.fixture
def sample() -> list[dict]:
    return [dict(c) for c in SAMPLE]


@pytest.fixture
def countries(sample) -> list[Country]:
    return [Country(**c) for c in sample]


@pytest.fixture
def dataset_file(tmp_path, monkeypatch):
    path = tmp_path / "countries.json"
    path.write_text(json.dumps(SAMPLE, ensure_ascii=False), encoding="utf-8")
    monkeypatch.setattr(settings, "data_path", str(path))
    monkeypatch.setattr(settings, "dataset_url", "")
    return path


@pytest.fixture
def client(dataset_file):
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    countries_router.limiter.reset()
    yield
    countries_router.limiter.reset()
