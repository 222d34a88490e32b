import sys
import os

import pytest

# Add src/ to sys.path so absolute imports (core.*, sfc.*, etc.) work.
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(_project_root, "src"))
sys.path.insert(0, _project_root)
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


@pytest.fixture
def fake():
    from fake_engines import FakeEngines
    return FakeEngines()


@pytest.fixture
def service(fake):
    from infrastructure import EnvironmentSettings
    from services.format_service import FormattingService
    return FormattingService(engines=fake.as_engines(), environment=EnvironmentSettings())
