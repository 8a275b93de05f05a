import pytest
import structlog

from lms.config import Settings
from lms.core.entities import Course
from lms.main import LMSPlatform
from lms.persistence import Registry, seed_registry


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep host LMS_* variables out of the settings under test"""
    for name in ("LMS_LOG_LEVEL", "LMS_LOG_JSON", "LMS_SEED_ON_STARTUP"):
        monkeypatch.delenv(name, raising=False)
    yield
    # configure_logging binds the stream captured for the current test
    structlog.reset_defaults()


@pytest.fixture
def registry():
    return seed_registry(Registry())


@pytest.fixture
def empty_registry():
    return Registry()


@pytest.fixture
def course():
    return Course("Chemistry", "teacher3@example.com")


@pytest.fixture
def platform():
    return LMSPlatform(Settings(seed_on_startup=True))


@pytest.fixture
def admin(platform):
    return platform.login("admin1@example.com", "adminpass")


@pytest.fixture
def teacher1(platform):
    return platform.login("teacher1@example.com", "teacherpass")


@pytest.fixture
def teacher2(platform):
    return platform.login("teacher2@example.com", "teacherpass")
