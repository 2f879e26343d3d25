"""FastAPI router exposing the settings surface and the send operation.

Example:
    ```python
    from fastapi import FastAPI
    from sendgrid_notifier import HttpMediaResolver, NotificationDispatcher
    from sendgrid_notifier.contrib.fastapi import create_notifier_router
    from sendgrid_notifier.storage import JsonFileSettingsStore

    dispatcher = NotificationDispatcher(
        store=JsonFileSettingsStore("settings.json"),
        resolver=HttpMediaResolver(),
    )
    app = FastAPI()
    app.include_router(create_notifier_router(dispatcher), prefix="/sendgrid")
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel

from ...exceptions import UnknownSettingError
from ...message import DispatchStatus
from ...sanitization import MetadataSanitizer, default_sanitizer
from ...settings import Setting

if TYPE_CHECKING:
    from ...dispatcher import NotificationDispatcher

logger = logging.getLogger(__name__)


class SettingUpdate(BaseModel):
    """Body of ``PUT /settings/{key}``."""

    value: Union[str, bool, int, float, None] = None


class NotificationPayload(BaseModel):
    """Body of ``POST /notifications``."""

    title: str
    body: str | None = None
    media_url: str | None = None


class DispatchResponse(BaseModel):
    status: str
    recipient: str | None = None
    reason: str | None = None


def create_notifier_router(
    dispatcher: NotificationDispatcher,
    sanitizer: MetadataSanitizer | None = None,
) -> APIRouter:
    """Build a router bound to one dispatcher.

    Routes:
        GET  /settings        list settings, API key masked.
        PUT  /settings/{key}  write one setting (404 for unknown keys).
        POST /notifications   send; 202 when unconfigured, 502 on failure.
    """
    sanitizer = sanitizer or default_sanitizer
    router = APIRouter()

    @router.get("/settings", response_model=list[Setting])
    async def list_settings() -> list[Setting]:
        settings = await dispatcher.get_settings()
        return [
            setting.model_copy(update={"value": sanitizer.mask(setting.key, setting.value)})
            for setting in settings
        ]

    @router.put("/settings/{key}", status_code=204, response_class=Response)
    async def update_setting(key: str, payload: SettingUpdate) -> Response:
        try:
            await dispatcher.put_setting(key, payload.value)
        except UnknownSettingError as err:
            raise HTTPException(status_code=404, detail=str(err)) from err
        return Response(status_code=204)

    @router.post("/notifications", response_model=DispatchResponse)
    async def send_notification(
        payload: NotificationPayload, response: Response
    ) -> DispatchResponse:
        try:
            result = await dispatcher.send_notification(
                payload.title,
                {"body": payload.body},
                payload.media_url,
            )
        except Exception as err:
            logger.debug("Notification %r failed: %s", payload.title, err)
            raise HTTPException(status_code=502, detail=str(err)) from err

        if result.status is DispatchStatus.SKIPPED:
            response.status_code = 202
        return DispatchResponse(
            status=result.status.value,
            recipient=result.recipient,
            reason=result.reason,
        )

    return router
