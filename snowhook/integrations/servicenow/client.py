"""
ServiceNow Table API client.

Creates incidents by POSTing to ``/api/now/table/incident`` with HTTP basic
authentication.
"""

from typing import Any, Dict, Optional

import httpx

from snowhook.config.exceptions import ConfigurationError
from snowhook.config.servicenow_config import ServiceNowConfig
from snowhook.models.incident import Incident
from snowhook.services.ticket_client import TicketClient, TicketSubmissionError
from snowhook.utils.logger import get_module_logger

logger = get_module_logger(__name__)

INCIDENT_TABLE_PATH = "/api/now/table/incident"
DEFAULT_TIMEOUT = 30.0
# Longest slice of a ServiceNow error body copied into error messages
MAX_ERROR_BODY = 500


class ServiceNowClientError(ConfigurationError):
    """Raised when the ServiceNow client cannot be built from the given credentials."""
    pass


def build_base_url(instance_name: str) -> str:
    """Instance names map to <name>.service-now.com; full URLs are used as-is."""
    if instance_name.startswith("http"):
        return instance_name.rstrip("/")
    return f"https://{instance_name}.service-now.com"


class ServiceNowClient(TicketClient):
    """
    Incident client for one ServiceNow instance.
    
    Holds a single httpx.AsyncClient for the process lifetime; it is safe to
    share between concurrent webhook requests.
    """
    
    def __init__(
        self,
        instance_name: str,
        user_name: str,
        password: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.
        
        Args:
            instance_name: ServiceNow instance name or base URL
            user_name: API user
            password: API password
            timeout: Timeout in seconds for each API call
            transport: Optional httpx transport (used by tests)
            
        Raises:
            ServiceNowClientError: If any credential is missing
        """
        instance_name = (instance_name or "").strip()
        if not instance_name:
            raise ServiceNowClientError("Missing instance name for the ServiceNow client")
        if not user_name:
            raise ServiceNowClientError("Missing user name for the ServiceNow client")
        if not password:
            raise ServiceNowClientError("Missing password for the ServiceNow client")
        
        self.base_url = build_base_url(instance_name)
        self.http_client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=httpx.BasicAuth(user_name, password),
            timeout=timeout,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            transport=transport,
        )
        logger.info(f"ServiceNow client created for {self.base_url}")
    
    @classmethod
    def from_config(cls, config: ServiceNowConfig, timeout: float = DEFAULT_TIMEOUT) -> "ServiceNowClient":
        """Build a client from the loaded configuration file section."""
        return cls(
            instance_name=config.instance_name,
            user_name=config.user_name,
            password=config.password,
            timeout=timeout,
        )
    
    async def create_incident(self, incident: Incident) -> Dict[str, Any]:
        """
        Create an incident in the ServiceNow incident table.
        
        Args:
            incident: Incident to create
            
        Returns:
            Decoded JSON response from ServiceNow
            
        Raises:
            TicketSubmissionError: On transport errors, non-2xx responses or
                a response body that is not JSON
        """
        try:
            response = await self.http_client.post(INCIDENT_TABLE_PATH, json=incident.model_dump())
        except httpx.TimeoutException as e:
            raise TicketSubmissionError(f"ServiceNow request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TicketSubmissionError(f"ServiceNow request failed: {e}") from e
        
        if response.is_error:
            raise TicketSubmissionError(
                f"ServiceNow returned status {response.status_code}: {response.text[:MAX_ERROR_BODY]}",
                status_code=response.status_code,
            )
        
        try:
            return response.json()
        except ValueError as e:
            raise TicketSubmissionError(
                f"ServiceNow returned an invalid JSON response (status {response.status_code}): {e}",
                status_code=response.status_code,
            ) from e
    
    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.aclose()
