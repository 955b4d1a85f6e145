"""Resolve the account or team a request runs under."""

from __future__ import annotations

from dataclasses import dataclass

from deploy_sdk.client import APIClient
from deploy_sdk.errors import APIRequestError, NotAuthorized, TeamDeleted

NOT_AUTHORIZED_MESSAGE = "You do not have access to the specified team"
TEAM_DELETED_MESSAGE = (
    "Your team was deleted. You can switch to a different one using `deploy switch`."
)


@dataclass(frozen=True)
class Scope:
    context_name: str
    user: dict
    team: dict | None = None


def get_scope(client: APIClient) -> Scope:
    try:
        user = client.get_user()
    except APIRequestError as exc:
        if exc.status_code == 403:
            raise NotAuthorized(str(exc)) from exc
        raise

    if not client.current_team:
        context_name = user.get("username") or user.get("email") or ""
        return Scope(context_name=str(context_name), user=user)

    try:
        team = client.get_team(client.current_team)
    except APIRequestError as exc:
        if exc.status_code == 403:
            raise NotAuthorized(NOT_AUTHORIZED_MESSAGE) from exc
        if exc.status_code == 404:
            raise TeamDeleted(TEAM_DELETED_MESSAGE) from exc
        raise

    return Scope(context_name=str(team.get("slug") or client.current_team), user=user, team=team)


__all__ = ["Scope", "get_scope"]
