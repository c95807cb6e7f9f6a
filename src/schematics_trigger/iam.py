"""Exchange an API key for IAM access and refresh tokens."""

from __future__ import annotations

import json

import httpx

from schematics_trigger.config import Settings
from schematics_trigger.logging import logger
from schematics_trigger.models import IamToken
from schematics_trigger.transport import send, status_line

GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"


def get_tokens(http: httpx.Client, api_key: str, settings: Settings) -> IamToken:
    """POST the API key to the IAM token endpoint.

    The response is parsed leniently: an error status or an undecodable body
    is logged and yields empty tokens instead of raising.

    Args:
        http: Client shared with the dispatch call.
        api_key: The user's API key.
        settings: Provides the endpoint and public client credential.

    Returns:
        The parsed IamToken, possibly with empty fields.

    Raises:
        TransportError: If the request cannot be sent or the body read.
    """
    logger.info("Requesting tokens from {}", settings.iam_url)
    response = send(
        http,
        "POST",
        settings.iam_url,
        data={"grant_type": GRANT_TYPE, "apikey": api_key},
        headers={
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        },
        auth=httpx.BasicAuth(settings.iam_client_id, settings.iam_client_secret),
    )

    logger.info("IAM response:")
    logger.info(status_line(response))
    if response.is_error:
        logger.warning("IAM returned {}, continuing with whatever it sent", response.status_code)

    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Could not decode IAM response body: {}", e)
        payload = None

    token = IamToken.from_dict(payload)
    if not token.access_token:
        logger.warning("IAM response has no access_token, dispatching with an empty token")
    return token
