# Models package
from .alert import Alert, AlertBatch
from .api_models import WebhookResponse
from .incident import Incident

__all__ = [
    "Alert", "AlertBatch",
    "Incident",
    "WebhookResponse",
]
