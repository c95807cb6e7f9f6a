"""Data types passed between the token exchange and the action dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Action(str, Enum):
    """Lifecycle actions a Schematics workspace accepts."""

    APPLY = "apply"
    DESTROY = "destroy"

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in {a.value for a in cls}


def _str_field(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _int_field(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass but never a valid value here
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


@dataclass(frozen=True)
class IamToken:
    """Credentials returned by the IAM token endpoint.

    Attributes:
        access_token: Short-lived token for API calls.
        refresh_token: Token Schematics uses to act on the user's behalf.
        ims_user_id: Numeric IMS user identifier.
        token_type: Usually "Bearer".
        expires_in: Lifetime of the access token in seconds.
        expiration: Unix timestamp when the access token expires.
        refresh_token_expiration: Unix timestamp when the refresh token expires.
        scope: Granted scope.
    """

    access_token: str = ""
    refresh_token: str = ""
    ims_user_id: int = 0
    token_type: str = ""
    expires_in: int = 0
    expiration: int = 0
    refresh_token_expiration: int = 0
    scope: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> IamToken:
        """Create IamToken from a decoded JSON body.

        Missing or mistyped fields fall back to empty values; this never raises.
        """
        if not isinstance(data, dict):
            return cls()
        return cls(
            access_token=_str_field(data, "access_token"),
            refresh_token=_str_field(data, "refresh_token"),
            ims_user_id=_int_field(data, "ims_user_id"),
            token_type=_str_field(data, "token_type"),
            expires_in=_int_field(data, "expires_in"),
            expiration=_int_field(data, "expiration"),
            refresh_token_expiration=_int_field(data, "refresh_token_expiration"),
            scope=_str_field(data, "scope"),
        )

    def __repr__(self) -> str:
        # Keep tokens out of tracebacks and debug logs
        return (
            f"IamToken(token_type={self.token_type!r}, ims_user_id={self.ims_user_id}, "
            f"expires_in={self.expires_in}, scope={self.scope!r})"
        )


@dataclass(frozen=True)
class ActionRequest:
    """A single apply/destroy call against a workspace.

    ``action`` is a plain string: values outside ``Action`` are sent unchanged.
    """

    workspace_id: str
    action: str
    access_token: str
    refresh_token: str

    @classmethod
    def from_token(cls, workspace_id: str, action: str, token: IamToken) -> ActionRequest:
        return cls(
            workspace_id=workspace_id,
            action=action,
            access_token=token.access_token,
            refresh_token=token.refresh_token,
        )

    def url(self, base_url: str) -> str:
        """Build ``<base>/v1/workspaces/<workspace_id>/<action>``.

        The values are inserted unescaped. httpx resolves dot segments such as
        ``..`` when it parses the result, so the path sent may be shorter.
        """
        return f"{base_url.rstrip('/')}/v1/workspaces/{self.workspace_id}/{self.action}"

    def headers(self) -> dict[str, str]:
        # The access token goes out without a "Bearer " prefix
        return {
            "Authorization": self.access_token,
            "Refresh_token": self.refresh_token,
        }

    def __repr__(self) -> str:
        return f"ActionRequest(workspace_id={self.workspace_id!r}, action={self.action!r})"


@dataclass(frozen=True)
class ActionResponse:
    """Raw result of the dispatch call. The body is not interpreted."""

    status_code: int
    reason: str
    body: str

    @property
    def status(self) -> str:
        """Status line as logged, e.g. "202 Accepted"."""
        return f"{self.status_code} {self.reason}".strip()

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
