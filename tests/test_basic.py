"""
Tests for Crash Reports Collector service
"""

import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from orchestrator.scanner import ScanOrchestrator
from tools.user_tool import UserAccountGateway


class RecordingScanner:
    """Scanner stub that records the query context."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.contexts = []

    def scan(self, context=None):
        self.contexts.append(context)
        if self.error:
            raise self.error
        return self.rows


@pytest.fixture
def client():
    """Create test client."""
    from orchestrator.main import app
    return TestClient(app)


class TestHealth:
    """Test health check endpoints."""

    def test_health_check(self, client):
        """Test health check endpoint."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "Crash Reports Collector"


class TestCrashes:
    """Test crash listing endpoint."""

    def test_list_crashes(self, client, monkeypatch):
        scanner = RecordingScanner(rows=[{'crash_path': "/a.crash", 'type': "application"}])
        monkeypatch.setattr("orchestrator.main.get_scanner", lambda: scanner)

        response = client.get("/api/v1/crashes")
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["rows"][0]["type"] == "application"
        assert not scanner.contexts[0].constraint('uid').exists()

    def test_uid_constraint(self, client, monkeypatch):
        scanner = RecordingScanner()
        monkeypatch.setattr("orchestrator.main.get_scanner", lambda: scanner)

        response = client.get("/api/v1/crashes", params={"uid": ["0", "501"]})
        assert response.status_code == 200
        assert scanner.contexts[0].constraint('uid').values == ["0", "501"]

    def test_scan_failure(self, client, monkeypatch):
        scanner = RecordingScanner(error=RuntimeError("boom"))
        monkeypatch.setattr("orchestrator.main.get_scanner", lambda: scanner)

        response = client.get("/api/v1/crashes")
        assert response.status_code == 500
        assert response.json()["detail"] == "boom"


class TestConfig:
    """Test configuration."""

    def test_settings_loading(self):
        """Test settings load correctly."""
        from orchestrator.config import get_settings
        settings = get_settings()
        assert settings.APP_NAME == "Crash Reports Collector"
        assert settings.LOG_LEVEL == "INFO"


class TestUserGateway:
    """Test local user enumeration."""

    @pytest.fixture
    def passwd(self, monkeypatch):
        entries = [
            SimpleNamespace(pw_name="root", pw_uid=0, pw_dir="/var/root"),
            SimpleNamespace(pw_name="alice", pw_uid=501, pw_dir="/Users/alice"),
            SimpleNamespace(pw_name="bob", pw_uid=502, pw_dir="/Users/bob"),
        ]
        monkeypatch.setattr("tools.user_tool.pwd.getpwall", lambda: entries)

    def test_all_users(self, passwd):
        users = UserAccountGateway().list_users()
        assert [u.username for u in users] == ["root", "alice", "bob"]

    def test_filter_by_uid(self, passwd):
        users = UserAccountGateway().list_users(["0", "502"])
        assert len(users) == 2
        assert [(u.uid, u.directory) for u in users] == [
            ("0", "/var/root"),
            ("502", "/Users/bob"),
        ]

    def test_unknown_uid(self, passwd):
        assert UserAccountGateway().list_users(["-42"]) == []


class TestLocalScanner:
    """Test the command line entry point."""

    def test_writes_rows(self, tmp_path, monkeypatch):
        rows = [{'crash_path': "/a.crash", 'type': "mobile"}]
        monkeypatch.setattr(ScanOrchestrator, "scan", lambda self, context=None: rows)

        from local_scanner import main
        output = tmp_path / "rows.json"
        assert main(["--uid", "501", "--output", str(output)]) == 0
        assert json.loads(output.read_text()) == rows
