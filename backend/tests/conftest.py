import pytest
import storage
from fastapi.testclient import TestClient
from main import app
from models import GradingConfiguration


@pytest.fixture(autouse=True)
def tmp_data_dir(tmp_path, monkeypatch):
    """Redirect all storage reads/writes to a temporary directory."""
    monkeypatch.setattr(storage, 'DATA_DIR', str(tmp_path))
    return tmp_path


@pytest.fixture()
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def config():
    """Three partials of 50 accumulated + 50 exam points."""
    return GradingConfiguration(
        number_of_partials=3,
        passing_grade=70,
        max_individual_activity_score=20,
        max_total_accumulated_score=50,
        max_exam_score=50,
    )
