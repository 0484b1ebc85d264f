"""API response models."""

from pydantic import BaseModel, Field

SUCCESS_MESSAGE = "Success"


class WebhookResponse(BaseModel):
    """Body returned by the webhook endpoint; ``status`` repeats the HTTP status code."""
    
    status: int = Field(..., description="HTTP status code of the response")
    message: str = Field(..., description="'Success' or the error that stopped processing")
