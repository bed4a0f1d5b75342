"""Inbound notifications from the payment provider."""

from __future__ import annotations

import hmac
import logging
from typing import Annotated

from fastapi import APIRouter, Header, HTTPException, Response, status

from chirpy.api.v1.dependencies import AccountRepoDep, SettingsDep
from chirpy.schemas.account import WebhookEvent

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])

UPGRADE_EVENT = "user.upgraded"


def _require_api_key(authorization: str | None, expected: str | None) -> None:
    """Check ``Authorization: ApiKey <key>`` when a key is configured."""
    if not expected:
        return
    scheme, _, presented = (authorization or "").partition(" ")
    if scheme != "ApiKey" or not hmac.compare_digest(
        presented.strip().encode("utf-8"), expected.encode("utf-8")
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )


@router.post(
    "/premium",
    summary="Handle a premium upgrade notification",
    status_code=status.HTTP_204_NO_CONTENT,
)
def premium_webhook(
    event: WebhookEvent,
    repo: AccountRepoDep,
    config: SettingsDep,
    authorization: Annotated[str | None, Header()] = None,
) -> Response:
    """Upgrade the named account on ``user.upgraded``; acknowledge anything else."""
    _require_api_key(authorization, config.webhook_api_key)
    if event.event != UPGRADE_EVENT:
        logger.debug("Ignoring webhook event %s", event.event)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    repo.upgrade(event.data.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
