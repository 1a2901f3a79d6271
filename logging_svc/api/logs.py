from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from logging_svc.dependencies import get_log_publisher
from logging_svc.domain.services.log_publisher import LogPublisher

router = APIRouter(prefix="/logs", tags=["logs"])

PUBLISHED_CONFIRMATION = "✅ Log published successfully!"

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _request_param(request: Request, name: str) -> str:
    """Read a required parameter from the query string, then the form body."""
    value = request.query_params.get(name)
    if value is None and request.headers.get("content-type", "").startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        field = form.get(name)
        value = field if isinstance(field, str) else None
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Required request parameter '{name}' is not present",
        )
    return value


@router.post("/send", response_class=PlainTextResponse)
async def send_log(request: Request, publisher: LogPublisher = Depends(get_log_publisher)):
    """Publish a log record. Confirms hand-off to the broker, not delivery."""
    level = await _request_param(request, "level")
    message = await _request_param(request, "message")

    await publisher.publish(level, message)
    return PUBLISHED_CONFIRMATION
