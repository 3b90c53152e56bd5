import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient


class TestHealthEndpoint:
    """Integration tests for the liveness endpoints"""

    def test_root_reports_healthy(self) -> None:
        from trade_bot.app import app

        client = TestClient(app)
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "Bot is running and healthy!"

    def test_healthz_without_bot(self) -> None:
        from trade_bot.app import create_app

        client = TestClient(create_app())
        response = client.get("/healthz")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["discord"]["status"] == "not_configured"
        assert isinstance(data["timestamp"], (int, float))
        assert len(data["job_id"]) > 0

    def test_healthz_with_bot(self) -> None:
        from trade_bot.app import app
        from trade_bot.routers.health import get_bot

        mock_bot = MagicMock()
        mock_bot.get_status.return_value = {
            "status": "connected",
            "user": "Trade Bot#0001",
            "latency_ms": 42.5,
            "commands_registered": True,
            "trade_channel_id": "1419373453626183760",
        }
        mock_bot.executor.command_registry.get_available_commands.return_value = [
            "trade"
        ]
        mock_bot.executor.get_execution_metrics.return_value = {
            "total_executions": 3
        }

        app.dependency_overrides[get_bot] = lambda: mock_bot

        try:
            client = TestClient(app)
            response = client.get("/healthz")

            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "healthy"
            assert data["checks"]["discord"]["status"] == "connected"
            assert data["checks"]["commands"]["available"] == ["trade"]
            assert data["checks"]["executor"]["total_executions"] == 3
        finally:
            app.dependency_overrides.clear()

    def test_healthz_stays_healthy_when_bot_status_fails(self) -> None:
        """Component problems are reported but never change the status"""
        from trade_bot.app import app
        from trade_bot.routers.health import get_bot

        mock_bot = MagicMock()
        mock_bot.get_status.side_effect = RuntimeError("gateway closed")
        mock_bot.executor.command_registry.get_available_commands.return_value = [
            "trade"
        ]
        mock_bot.executor.get_execution_metrics.return_value = {}

        app.dependency_overrides[get_bot] = lambda: mock_bot

        try:
            client = TestClient(app)
            response = client.get("/healthz")

            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "healthy"
            assert data["checks"]["discord"]["status"] == "unknown"
            assert "gateway closed" in data["checks"]["discord"]["error"]
        finally:
            app.dependency_overrides.clear()

    def test_health_check_response_model_validation(self) -> None:
        from trade_bot.models.responses import HealthCheckResponse

        response = HealthCheckResponse(
            status="healthy", job_id="abc", timestamp=1234567890.0, checks={}
        )
        assert response.status == "healthy"

        with pytest.raises(Exception):  # Pydantic validation error
            HealthCheckResponse(status="healthy", job_id="abc", checks={})
