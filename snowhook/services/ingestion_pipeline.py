"""
Ingestion Pipeline

Turns a decoded Alertmanager batch into ServiceNow incidents, one incident
per alert, submitted one after another in the order the alerts were received.
"""

from snowhook.metrics import (
    alerts_received_total,
    batch_processing_seconds,
    incident_errors_total,
    incidents_created_total,
)
from snowhook.models.alert import AlertBatch
from snowhook.services.incident_mapper import alert_to_incident
from snowhook.services.ticket_client import TicketClient, TicketSubmissionError
from snowhook.utils.logger import get_module_logger

logger = get_module_logger(__name__)


class IngestionPipeline:
    """
    Creates one incident per alert of a batch.
    
    Processing stops at the first failed submission: alerts after it are not
    attempted and the error is raised to the caller. Incidents created before
    the failure are not rolled back.
    """
    
    def __init__(self, ticket_client: TicketClient):
        """
        Initialize the pipeline.
        
        Args:
            ticket_client: Client used to create incidents; shared across requests
        """
        self.ticket_client = ticket_client
    
    async def process_batch(self, batch: AlertBatch) -> None:
        """
        Create incidents for every alert in the batch.
        
        Args:
            batch: Decoded webhook payload
            
        Raises:
            TicketSubmissionError: The first submission failure; remaining
                alerts in the batch are skipped
        """
        logger.info(
            f"Alerts: Status={batch.status}, GroupLabels={batch.group_labels}, "
            f"CommonLabels={batch.common_labels}"
        )
        alerts_received_total.inc(len(batch.alerts))
        
        with batch_processing_seconds.time():
            for index, alert in enumerate(batch.alerts):
                incident = alert_to_incident(alert)
                try:
                    response = await self.ticket_client.create_incident(incident)
                except TicketSubmissionError as e:
                    incident_errors_total.inc()
                    skipped = len(batch.alerts) - index - 1
                    logger.error(
                        f"Error while creating incident for alert {index + 1}/{len(batch.alerts)}: {e}"
                        + (f" ({skipped} remaining alert(s) skipped)" if skipped else "")
                    )
                    raise
                
                incidents_created_total.inc()
                logger.debug(f"Response {response}")
