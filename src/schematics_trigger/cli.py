"""Command line interface for schematics-trigger.

Usage:
    schematics-trigger <api-key> <workspace-id> <apply|destroy>
    python -m schematics_trigger <api-key> <workspace-id> <apply|destroy>

Exit codes:
    0    both calls completed, whatever status the services returned
    1    a request could not be sent or read, or settings are invalid
    2    wrong number of arguments (no request is made)
    130  interrupted
"""

from __future__ import annotations

import argparse
import sys

import httpx

from schematics_trigger.config import Settings, load_settings
from schematics_trigger.exceptions import ConfigurationError, TransportError
from schematics_trigger.iam import get_tokens
from schematics_trigger.logging import setup_logging
from schematics_trigger.models import Action, ActionRequest, ActionResponse
from schematics_trigger.schematics import trigger_action
from schematics_trigger.transport import create_http_client


def run(
    api_key: str,
    workspace_id: str,
    action: str,
    settings: Settings,
    http: httpx.Client | None = None,
) -> ActionResponse:
    """Get tokens, then send the action to the workspace.

    Args:
        api_key: API key exchanged at the IAM endpoint.
        workspace_id: Target Schematics workspace.
        action: "apply" or "destroy"; other values are sent unchanged.
        settings: Endpoints, credential and timeout.
        http: Client to use for both calls. When omitted one is created
            and closed before returning.

    Returns:
        The raw Schematics response.

    Raises:
        TransportError: If either request fails; nothing is retried.
    """
    owns_client = http is None
    client = create_http_client(settings) if http is None else http
    try:
        token = get_tokens(client, api_key, settings)
        request = ActionRequest.from_token(workspace_id, action, token)
        return trigger_action(client, request, settings)
    finally:
        if owns_client:
            client.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schematics-trigger",
        description="Apply or destroy a Schematics workspace using an IAM API key",
    )
    parser.add_argument("api_key", help="IAM API key")
    parser.add_argument("workspace_id", help="Schematics workspace ID")
    parser.add_argument(
        "action",
        help=f"Action to run: {' or '.join(a.value for a in Action)}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging()
    try:
        settings = load_settings()
        setup_logging(settings.log_level)
        run(args.api_key, args.workspace_id, args.action, settings)
        return 0
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except TransportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted", file=sys.stderr)
        return 130
