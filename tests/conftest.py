import mongomock
import pytest

from jobboard_seed.core.config import get_settings
from jobboard_seed.services.seed_service import FixtureLoader


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    # Minimum bcrypt cost keeps the suite quick
    monkeypatch.setenv('BCRYPT_ROUNDS', '4')
    monkeypatch.setenv('MONGO_URI', 'mongodb://localhost:27017/jobportal_test')
    monkeypatch.setenv('MONGODB_DB', 'jobportal_test')
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def db(mongo_client):
    return mongo_client['jobportal_test']


@pytest.fixture
def loader(db):
    return FixtureLoader(db, verbose=False)
