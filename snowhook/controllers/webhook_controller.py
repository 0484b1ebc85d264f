"""
Webhook Controller

FastAPI controller for the Alertmanager webhook endpoint.
Decodes the alert batch, hands it to the ingestion pipeline and reports the
outcome as ``{"status": <code>, "message": <text>}``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from snowhook.metrics import webhook_requests_total
from snowhook.models.alert import AlertBatch
from snowhook.models.api_models import SUCCESS_MESSAGE, WebhookResponse
from snowhook.services.ingestion_pipeline import IngestionPipeline
from snowhook.services.ticket_client import TicketSubmissionError
from snowhook.utils.logger import get_module_logger

logger = get_module_logger(__name__)

router = APIRouter(tags=["webhook"])


def get_ingestion_pipeline(request: Request) -> IngestionPipeline:
    """
    Dependency injection function for the webhook endpoint.
    
    Raises:
        HTTPException: If the application has not finished starting up
    """
    pipeline = getattr(request.app.state, "ingestion_pipeline", None)
    if pipeline is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return pipeline


def send_json_response(status: int, message: str) -> JSONResponse:
    """Build the webhook response; the HTTP status line matches the body's status."""
    webhook_requests_total.labels(status_code=str(status)).inc()
    body = WebhookResponse(status=status, message=message)
    return JSONResponse(status_code=status, content=body.model_dump())


async def read_request_body(request: Request) -> AlertBatch:
    """
    Read the request body and decode it as an Alertmanager batch.
    
    Raises:
        ValidationError: If the body is not valid JSON or does not match the payload schema
    """
    body = await request.body()
    return AlertBatch.model_validate_json(body)


@router.post(
    "/webhook",
    response_model=WebhookResponse,
    responses={
        400: {"model": WebhookResponse, "description": "Malformed webhook payload"},
        500: {"model": WebhookResponse, "description": "Incident creation failed"},
    },
)
async def webhook(
    request: Request,
    pipeline: Annotated[IngestionPipeline, Depends(get_ingestion_pipeline)],
) -> JSONResponse:
    """Create one ServiceNow incident per alert of an Alertmanager notification."""
    try:
        batch = await read_request_body(request)
    except ValidationError as e:
        logger.error(f"Error reading request body : {e}")
        return send_json_response(400, str(e))
    except ClientDisconnect:
        logger.error("Error reading request body : client disconnected")
        return send_json_response(400, "client disconnected")

    try:
        await pipeline.process_batch(batch)
    except TicketSubmissionError as e:
        logger.error(f"Error managing incident from alert : {e}")
        return send_json_response(500, str(e))
    except Exception as e:
        # A TicketClient implementation leaking a non-TicketSubmissionError
        logger.exception(f"Unexpected error managing incident from alert : {e}")
        return send_json_response(500, str(e))
    
    return send_json_response(200, SUCCESS_MESSAGE)
