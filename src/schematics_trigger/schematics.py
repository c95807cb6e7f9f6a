"""Trigger apply or destroy on a Schematics workspace."""

from __future__ import annotations

import httpx

from schematics_trigger.config import Settings
from schematics_trigger.logging import logger
from schematics_trigger.models import Action, ActionRequest, ActionResponse
from schematics_trigger.transport import send, status_line


def trigger_action(
    http: httpx.Client, request: ActionRequest, settings: Settings
) -> ActionResponse:
    """PUT the action to the workspace and log the raw reply.

    The remote outcome is not interpreted; an error status is returned like
    any other.

    Raises:
        TransportError: If the request cannot be sent or the body read.
    """
    endpoint = request.url(settings.schematics_url)
    if not Action.is_known(request.action):
        logger.debug("Action {!r} is not apply/destroy, sending it as given", request.action)

    logger.info("endpoint to target:")
    logger.info(endpoint)

    response = send(http, "PUT", endpoint, headers=request.headers())

    logger.info("Schematics response:")
    logger.info(status_line(response))
    logger.info(response.text)

    return ActionResponse(
        status_code=response.status_code,
        reason=response.reason_phrase,
        body=response.text,
    )
