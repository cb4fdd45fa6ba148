# pytest fixtures shared by the service and route tests

import os
import random

# Settings are read once at import time: point them at the mock DB first
os.environ.setdefault("USE_MOCK_DB", "true")
os.environ.setdefault("MOCK_DB_PATH", "./.pytest-mock-db.json")

import pytest
from fastapi.testclient import TestClient

from app.models.district import DistrictRecord
from app.services.context_service import AqiTable, ContextService, HelpDirectory, MediaCatalog, set_context_service
from app.services.record_store import InMemoryRecordStore, RecordStore
from app.services.risk_query_service import RiskQueryService, set_risk_query_service
from app.services.trend_synthesizer import TrendSynthesizer


class FixedRandom(random.Random):
    """random() always returns the same value."""

    def __init__(self, value: float = 0.0):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


class FailingStore(RecordStore):
    """Store whose read always fails; counts attempts."""

    def __init__(self):
        self.calls = 0

    def fetch_all(self):
        self.calls += 1
        raise ConnectionError("connection refused")


def make_record(district: str, date: str = "2024-03-10", **counts) -> DistrictRecord:
    doc = {"District": district, "Date": date}
    doc.update(counts)
    return DistrictRecord.from_document(doc)


@pytest.fixture
def records():
    return [
        make_record("Delhi East", Murder=10, Rape=3, Theft=2, Dengue=1, Malaria=0, COVID19=1,
                    Latitude=28.628, Longitude=77.295),
        make_record("New Delhi", Murder=2, Rape=1, Theft=14, Dengue=21, Malaria=9, COVID19=4,
                    Latitude=28.6139, Longitude=77.209),
        make_record("North Delhi", Murder=5, Rape=5, Theft=5, Dengue=5, Malaria=5, COVID19=5,
                    Latitude=28.7, Longitude=77.2),
        # No coordinates: valid for queries, absent from the map
        make_record("Shahdara", Murder=1, Theft=5, Dengue=12, Malaria=3),
    ]


@pytest.fixture
def store(records):
    return InMemoryRecordStore(records)


@pytest.fixture
def fixed_synthesizer():
    return TrendSynthesizer(rng=FixedRandom(0.0), jitter_bound=5.0)


@pytest.fixture
def service(store, fixed_synthesizer):
    return RiskQueryService(store=store, synthesizer=fixed_synthesizer)


@pytest.fixture
def media_root(tmp_path):
    folder = tmp_path / "media" / "facts" / "health" / "Dengue"
    folder.mkdir(parents=True)
    for name in ("img1.png", "img10.png", "img2.png", "notes.txt"):
        (folder / name).write_bytes(b"x")
    videos = tmp_path / "media" / "instructions" / "crime" / "Theft"
    videos.mkdir(parents=True)
    (videos / "video1.mp4").write_bytes(b"x")
    return str(tmp_path / "media")


@pytest.fixture
def context_service(media_root):
    aqi = AqiTable({"Delhi East": {"aqi": 182}, "New Delhi": {"aqi": 96}, "South Delhi": {"aqi": 241}})
    help_directory = HelpDirectory({
        "Delhi East": {
            "hospital": {"name": "LBS Hospital", "address": "Khichripur", "phone": "102",
                         "latitude": 28.62, "longitude": 77.30},
            "police_station": {"name": "Mayur Vihar PS", "address": "Mayur Vihar", "phone": "112",
                               "latitude": 28.60, "longitude": 77.28},
        }
    })
    return ContextService(media=MediaCatalog(media_root, "/media"), aqi=aqi, help_directory=help_directory)


@pytest.fixture
def client(service, context_service):
    from app.main import app

    set_risk_query_service(service)
    set_context_service(context_service)
    yield TestClient(app)
    set_risk_query_service(None)
    set_context_service(None)
