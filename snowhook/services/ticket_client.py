"""
Ticket client interface.

The ingestion pipeline only needs "create an incident"; how the incident
reaches the ticketing system (transport, auth) is up to the implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from snowhook.models.incident import Incident


class TicketSubmissionError(Exception):
    """
    Raised when an incident could not be created in the ticketing system.
    
    Covers transport failures, authentication failures and rejections by
    the remote API. ``str(error)`` is what the webhook caller sees.
    """
    
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TicketClient(ABC):
    """Capability to create incidents in an external ticketing system."""
    
    @abstractmethod
    async def create_incident(self, incident: Incident) -> Dict[str, Any]:
        """
        Create one incident.
        
        Args:
            incident: Incident to create
            
        Returns:
            Decoded response body from the ticketing system
            
        Raises:
            TicketSubmissionError: If the incident could not be created
        """
    
    async def aclose(self) -> None:
        """Release any resources held by the client."""
        return None
