import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from logging_svc.dependencies import get_binder
from logging_svc.infrastructure.binder.message_binder import Message, MessageBinder
from logging_svc.schemas.responses import DeliveryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bindings", tags=["bindings"])


@router.post("/{destination}", response_model=DeliveryResponse)
async def push_message(destination: str, request: Request, binder: MessageBinder = Depends(get_binder)):
    """Push ingress: the broker delivers a message for a subscribed destination."""
    if not binder.has_subscribers(destination):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No consumer bound to destination '{destination}'",
        )

    headers = {"contentType": request.headers.get("content-type", "application/json")}
    if "x-message-id" in request.headers:
        headers["id"] = request.headers["x-message-id"]

    message = Message(payload=await request.body(), headers=headers)
    delivered = await binder.dispatch(destination, message)
    logger.info(f"📬 Pushed message on '{destination}' delivered to {delivered} consumer(s)")
    return DeliveryResponse(destination=destination, delivered=delivered)
