"""Typed SDK client for platform API endpoints."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from deploy_sdk.errors import APIRequestError, APIUnavailableError

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "DEPLOY_TOKEN"
RETRY_STATUSES = (429, 500, 502, 503, 504)


def _build_session(retries: int) -> requests.Session:
    """Session that retries throttled and 5xx responses."""
    attempts = max(0, int(retries))
    adapter = HTTPAdapter(
        max_retries=Retry(
            total=attempts,
            status=attempts,
            status_forcelist=RETRY_STATUSES,
            backoff_factor=0.2,
            allowed_methods=("GET", "POST", "PUT"),
            raise_on_status=False,
        )
    )
    session = requests.Session()
    for prefix in ("http://", "https://"):
        session.mount(prefix, adapter)
    return session


@dataclass
class APIClient:
    api_url: str
    token: str | None = None
    current_team: str | None = None
    debug: bool = False
    timeout: float = 10.0
    retries: int = 2

    def __post_init__(self) -> None:
        self._session = _build_session(self.retries)
        if self.token is None:
            env_token = os.getenv(TOKEN_ENV_VAR)
            self.token = env_token.strip() or None if env_token else None

    def __enter__(self) -> APIClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def _url(self, path: str) -> str:
        return f"{self.api_url.rstrip('/')}/{path.lstrip('/')}"

    def fetch(
        self,
        method: str,
        path: str,
        *,
        json_payload: dict | None = None,
        params: dict | None = None,
    ) -> dict:
        query = dict(params or {})
        if self.current_team:
            query["teamId"] = self.current_team
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else None
        url = self._url(path)
        started = time.monotonic()
        try:
            response = self._session.request(
                method,
                url,
                json=json_payload,
                params=query or None,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise APIUnavailableError(str(exc)) from exc

        if self.debug:
            elapsed_ms = int((time.monotonic() - started) * 1000)
            logger.debug("%s %s -> %s (%dms)", method, url, response.status_code, elapsed_ms)

        if response.status_code >= 400:
            body: object | None = None
            try:
                body = response.json()
            except Exception:
                body = None
            error: dict = {}
            if isinstance(body, dict) and isinstance(body.get("error"), dict):
                error = body["error"]
            raw_code = error.get("code")
            code = raw_code if isinstance(raw_code, str) else None
            detail = error.get("message")
            if isinstance(detail, str) and detail:
                message = detail
            else:
                message = f"API request failed: {response.status_code} {response.text}"
            raise APIRequestError(
                message,
                status_code=response.status_code,
                code=code,
                body=error,
            )
        if response.status_code == 204:
            return {}
        return response.json()

    def get_user(self) -> dict:
        payload = self.fetch("GET", "/www/user")
        return payload.get("user", payload)

    def get_team(self, team_id: str) -> dict:
        return self.fetch("GET", f"/teams/{team_id}")

    def issue_cert(self, cns: list[str]) -> dict:
        return self.fetch("POST", "/v3/now/certs", json_payload={"domains": list(cns)})

    def upload_cert(self, *, cert: str, key: str, ca: str) -> dict:
        return self.fetch(
            "PUT",
            "/v3/now/certs",
            json_payload={"ca": ca, "cert": cert, "key": key},
        )


__all__ = ["APIClient"]
