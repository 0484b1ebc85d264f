from .client import ServiceNowClient, ServiceNowClientError

__all__ = ["ServiceNowClient", "ServiceNowClientError"]
