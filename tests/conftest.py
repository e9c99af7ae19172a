import pytest
from fastapi.testclient import TestClient

from clinicdesk.main import create_app
from clinicdesk.queue_main import create_queue_app


class RecordingAudit:
    def __init__(self):
        self.entries = []

    def log(self, action, subject=None, success=True, details=None):
        self.entries.append({"action": action, "subject": subject, "success": success, "details": details or {}})


@pytest.fixture
def audit():
    return RecordingAudit()


@pytest.fixture
def client(audit, tmp_path):
    # Missing static dir, so no front-end is mounted
    return TestClient(create_app(audit_logger=audit, static_dir=str(tmp_path / "missing")))


@pytest.fixture
def queue_client(audit, tmp_path):
    return TestClient(create_queue_app(audit_logger=audit, static_dir=str(tmp_path / "missing")))
