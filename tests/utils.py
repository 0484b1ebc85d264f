"""
Test utilities shared across the unit tests.

1. AlertFactory - Alertmanager webhook payloads and decoded alert models
2. MockFactory - Ticket client doubles and settings
"""

from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

from snowhook.config.settings import Settings
from snowhook.models.alert import Alert, AlertBatch
from snowhook.models.incident import Incident
from snowhook.services.ticket_client import TicketClient, TicketSubmissionError


class AlertFactory:
    """Factory for Alertmanager webhook payloads."""

    @staticmethod
    def create_alert_payload(
        summary: str = "High CPU usage",
        description: str = "CPU usage above 90% for 5 minutes",
        assignment_group: Optional[str] = "Platform Team",
        **label_overrides: str,
    ) -> Dict[str, Any]:
        """Create one alert entry as Alertmanager sends it."""
        labels = {"alertname": "HighCPU", "instance": "node-1:9100", **label_overrides}
        if assignment_group is not None:
            labels["assignment_group"] = assignment_group
        return {
            "status": "firing",
            "labels": labels,
            "annotations": {"summary": summary, "description": description},
            "startsAt": "2024-05-01T10:00:00Z",
            "endsAt": "0001-01-01T00:00:00Z",
            "generatorURL": "http://prometheus:9090/graph?g0.expr=cpu",
            "fingerprint": "c0ffee1234567890",
        }

    @staticmethod
    def create_batch_payload(
        alerts: Optional[List[Dict[str, Any]]] = None,
        status: str = "firing",
    ) -> Dict[str, Any]:
        """Create a complete webhook payload."""
        if alerts is None:
            alerts = [AlertFactory.create_alert_payload()]
        return {
            "version": "4",
            "groupKey": "{}:{alertname=\"HighCPU\"}",
            "truncatedAlerts": 0,
            "status": status,
            "receiver": "servicenow",
            "groupLabels": {"alertname": "HighCPU"},
            "commonLabels": {"alertname": "HighCPU"},
            "commonAnnotations": {},
            "externalURL": "http://alertmanager:9093",
            "alerts": alerts,
        }

    @staticmethod
    def create_batch(count: int = 1) -> AlertBatch:
        """Create a decoded batch with ``count`` distinguishable alerts."""
        alerts = [
            AlertFactory.create_alert_payload(summary=f"alert {i}", assignment_group=f"group-{i}")
            for i in range(count)
        ]
        return AlertBatch.model_validate(AlertFactory.create_batch_payload(alerts))

    @staticmethod
    def create_alert(labels: Optional[Dict[str, str]] = None, annotations: Optional[Dict[str, str]] = None) -> Alert:
        return Alert(labels=labels or {}, annotations=annotations or {})


class MockFactory:
    """Factory for collaborator doubles."""

    @staticmethod
    def create_ticket_client(fail_at: Optional[int] = None, error_message: str = "ServiceNow returned status 401: Unauthorized") -> AsyncMock:
        """
        Create a ticket client mock.

        Args:
            fail_at: Zero-based index of the create_incident call that raises
            error_message: Message of the raised TicketSubmissionError
        """
        client = AsyncMock(spec=TicketClient)
        calls = {"count": 0}

        async def create_incident(incident: Incident) -> Dict[str, Any]:
            index = calls["count"]
            calls["count"] += 1
            if fail_at is not None and index == fail_at:
                raise TicketSubmissionError(error_message, status_code=401)
            return {"result": {"number": f"INC{index:07d}", "short_description": incident.short_description}}

        client.create_incident.side_effect = create_incident
        return client

    @staticmethod
    def create_settings(**overrides: Any) -> Settings:
        values = {"config_file": "config/servicenow.yml", "listen_address": ":9877", "log_level": "INFO"}
        values.update(overrides)
        return Settings(**values)
