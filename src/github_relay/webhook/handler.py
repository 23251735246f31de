"""GitHub webhook handler."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Header, Query, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from github_relay.config import Settings
from github_relay.events import EventRouter
from github_relay.webhook.validator import verify_delivery

logger = logging.getLogger(__name__)
router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_event_router(request: Request) -> EventRouter:
    return request.app.state.event_router


async def read_payload(request: Request) -> bytes | str:
    """
    Extract the JSON payload from a delivery.

    GitHub sends either a form with a ``payload`` field or a raw JSON body,
    depending on the content type configured for the hook. A form that cannot
    be parsed yields an empty payload, which the router reports as a decode
    error.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except (StarletteHTTPException, MultiPartException) as e:
            detail = getattr(e, "detail", None) or getattr(e, "message", str(e))
            logger.warning(f"Could not parse form body: {detail}")
            return ""
        payload = form.get("payload")
        return payload if isinstance(payload, str) else ""
    return await request.body()


@router.post("/")
@router.post("/webhook")
async def github_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    team: str | None = Query(None),
    x_hub_signature_256: str | None = Header(None),
    x_github_event: str | None = Header(None),
    x_github_delivery: str | None = Header(None),
    settings: Settings = Depends(get_app_settings),
    event_router: EventRouter = Depends(get_event_router),
) -> dict[str, str]:
    """
    Handle incoming GitHub webhooks.

    The caller always gets the same acknowledgement; formatting and sending
    run in the background and failures only show up in the logs.
    """
    if settings.github_webhook_secret:
        # Signed over the raw body; Starlette caches it for the form parse below
        body = await request.body()
        if not verify_delivery(
            body,
            x_hub_signature_256,
            settings.github_webhook_secret,
            event_type=x_github_event,
            delivery_id=x_github_delivery,
        ):
            return {"status": "received"}

    raw_payload = await read_payload(request)
    background_tasks.add_task(event_router.dispatch, team, x_github_event, raw_payload)

    return {"status": "received"}
