"""schematics-trigger: apply or destroy a Schematics workspace from the command line.

Example:
    from schematics_trigger import Settings, run

    response = run("my-api-key", "us-south.workspace.demo.1a2b3c", "apply", Settings())
    print(response.status)
"""

from schematics_trigger.cli import run
from schematics_trigger.config import Settings, get_settings, load_settings
from schematics_trigger.exceptions import (
    ConfigurationError,
    SchematicsTriggerError,
    TransportError,
)
from schematics_trigger.iam import get_tokens
from schematics_trigger.models import Action, ActionRequest, ActionResponse, IamToken
from schematics_trigger.schematics import trigger_action

__version__ = "0.1.0"
__all__ = [
    # Flow
    "run",
    "get_tokens",
    "trigger_action",
    # Models
    "Action",
    "ActionRequest",
    "ActionResponse",
    "IamToken",
    # Settings
    "Settings",
    "get_settings",
    "load_settings",
    # Exceptions
    "SchematicsTriggerError",
    "TransportError",
    "ConfigurationError",
]
