"""Certificate creation against the platform API.

Expected failures come back as ``CertError`` values so callers can report
them without an exception handler. Anything the API returns that is not a
known certificate failure is raised unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

from deploy_sdk.certs import errors as cert_errors
from deploy_sdk.certs.errors import CertError
from deploy_sdk.certs.schemas import Certificate
from deploy_sdk.client import APIClient
from deploy_sdk.errors import APIRequestError

CertResult = Union[Certificate, CertError]


def _error_domain(exc: APIRequestError, fallback: Sequence[str]) -> str:
    domain = exc.body.get("domain")
    if isinstance(domain, str) and domain:
        return domain
    return ", ".join(fallback)


def _error_domains(exc: APIRequestError, fallback: Sequence[str]) -> list[str]:
    domains = exc.body.get("domains")
    if isinstance(domains, list) and domains:
        return [str(item) for item in domains]
    return list(fallback)


def create_cert_for_cns(client: APIClient, cns: Sequence[str], context_name: str) -> CertResult:
    try:
        payload = client.issue_cert(list(cns))
    except APIRequestError as exc:
        code = exc.code
        if code == "forbidden":
            return cert_errors.domain_permission_denied(_error_domain(exc, cns), context_name)
        if code == "rate_limited":
            return cert_errors.too_many_certificates(_error_domains(exc, cns))
        if code == "too_many_requests":
            retry_after = exc.body.get("retryAfter")
            return cert_errors.too_many_requests(
                "certificates",
                retry_after if isinstance(retry_after, int) else None,
            )
        if code == "validation_error":
            return cert_errors.domain_validation_running(_error_domain(exc, cns))
        if code == "should_share_root_domain":
            return cert_errors.domains_should_share_root(_error_domains(exc, cns))
        if code == "cant_solve_challenge":
            challenge_type = exc.body.get("type")
            return cert_errors.cant_solve_challenge(
                _error_domain(exc, cns),
                challenge_type if isinstance(challenge_type, str) else None,
            )
        if code == "invalid_wildcard_domain":
            return cert_errors.invalid_wildcard_domain(_error_domain(exc, cns))
        if code == "not_found":
            return cert_errors.domain_not_found(_error_domain(exc, cns))
        if code == "configuration_error":
            return cert_errors.domain_configuration_error(_error_domain(exc, cns))
        raise
    return Certificate.model_validate(payload)


def _read_material(path: str) -> str:
    return Path(path).resolve().read_text(encoding="utf-8")


def create_cert_from_file(
    client: APIClient,
    key_path: str,
    crt_path: str,
    ca_path: str,
) -> CertResult:
    try:
        cert = _read_material(crt_path)
        key = _read_material(key_path)
        ca = _read_material(ca_path)
    except FileNotFoundError as exc:
        return cert_errors.invalid_cert(f'The specified file "{exc.filename}" doesn\'t exist.')

    try:
        payload = client.upload_cert(cert=cert, key=key, ca=ca)
    except APIRequestError as exc:
        if exc.code == "forbidden":
            domain = exc.body.get("domain")
            return cert_errors.domain_permission_denied(
                domain if isinstance(domain, str) else "",
                client.current_team or "your account",
            )
        if exc.code in {"bad_request", "invalid_cert"}:
            return cert_errors.invalid_cert(str(exc))
        raise
    return Certificate.model_validate(payload)


__all__ = ["CertResult", "create_cert_for_cns", "create_cert_from_file"]
