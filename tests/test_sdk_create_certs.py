from __future__ import annotations

import pytest

from deploy_sdk.certs import Certificate, CertError, create_cert_for_cns, create_cert_from_file
from deploy_sdk.errors import APIRequestError


class _Client:
    def __init__(self, *, error: Exception | None = None, current_team: str | None = None):
        self.error = error
        self.current_team = current_team
        self.issued: list[list[str]] = []
        self.uploaded: list[dict] = []

    def issue_cert(self, cns: list[str]) -> dict:
        self.issued.append(cns)
        if self.error is not None:
            raise self.error
        return {"uid": "cert_1", "cns": cns, "autoRenew": True, "created": "2026-01-01"}

    def upload_cert(self, *, cert: str, key: str, ca: str) -> dict:
        self.uploaded.append({"cert": cert, "key": key, "ca": ca})
        if self.error is not None:
            raise self.error
        return {"uid": "cert_2", "cns": ["a.com", "b.com"]}


def _api_error(code: str, **body) -> APIRequestError:
    return APIRequestError(f"{code} failure", status_code=400, code=code, body={"code": code, **body})


def test_issue_returns_certificate() -> None:
    client = _Client()
    result = create_cert_for_cns(client, ["a.com", "www.a.com"], "acme")
    assert isinstance(result, Certificate)
    assert result.cns == ["a.com", "www.a.com"]
    assert result.auto_renew is True
    assert client.issued == [["a.com", "www.a.com"]]


@pytest.mark.parametrize(
    "error,code,fragment",
    [
        (_api_error("forbidden", domain="a.com"), "DOMAIN_PERMISSION_DENIED", "a.com under acme"),
        (_api_error("rate_limited", domains=["a.com"]), "TOO_MANY_CERTIFICATES", "a.com"),
        (_api_error("too_many_requests", retryAfter=30), "TOO_MANY_REQUESTS", "30s"),
        (_api_error("validation_error", domain="a.com"), "DOMAIN_VALIDATION_RUNNING", "a.com"),
        (_api_error("should_share_root_domain"), "CNS_SHOULD_SHARE_ROOT", "same root"),
        (
            _api_error("cant_solve_challenge", domain="a.com", type="http-01"),
            "CANT_SOLVE_CHALLENGE",
            "http-01",
        ),
        (_api_error("invalid_wildcard_domain", domain="*.a.com"), "INVALID_WILDCARD_DOMAIN", "*.a.com"),
        (_api_error("not_found", domain="a.com"), "DOMAIN_NOT_FOUND", "a.com"),
        (_api_error("configuration_error", domain="a.com"), "DOMAIN_CONFIGURATION_ERROR", "a.com"),
    ],
)
def test_issue_maps_known_failures_to_values(error, code, fragment) -> None:
    result = create_cert_for_cns(_Client(error=error), ["a.com"], "acme")
    assert isinstance(result, CertError)
    assert result.code == code
    assert fragment in result.message


def test_issue_unknown_failure_propagates() -> None:
    with pytest.raises(APIRequestError):
        create_cert_for_cns(_Client(error=_api_error("internal_error")), ["a.com"], "acme")


def _write_material(tmp_path):
    crt = tmp_path / "a.crt"
    key = tmp_path / "a.key"
    ca = tmp_path / "a.ca"
    crt.write_text("CERT", encoding="utf-8")
    key.write_text("KEY", encoding="utf-8")
    ca.write_text("CA", encoding="utf-8")
    return str(key), str(crt), str(ca)


def test_upload_reads_files(tmp_path) -> None:
    client = _Client()
    key, crt, ca = _write_material(tmp_path)
    result = create_cert_from_file(client, key, crt, ca)
    assert isinstance(result, Certificate)
    assert result.cns == ["a.com", "b.com"]
    assert client.uploaded == [{"cert": "CERT", "key": "KEY", "ca": "CA"}]


def test_upload_missing_file_is_invalid_cert(tmp_path) -> None:
    client = _Client()
    key, crt, ca = _write_material(tmp_path)
    missing = tmp_path / "missing.ca"
    result = create_cert_from_file(client, key, crt, str(missing))
    assert isinstance(result, CertError)
    assert result.code == "INVALID_CERT"
    assert "missing.ca" in result.message
    assert client.uploaded == []


def test_upload_bad_request_is_invalid_cert(tmp_path) -> None:
    client = _Client(error=APIRequestError("Certificate is expired", status_code=400, code="bad_request"))
    result = create_cert_from_file(client, *_write_material(tmp_path))
    assert isinstance(result, CertError)
    assert result.message == "Certificate is expired"


def test_upload_unknown_failure_propagates(tmp_path) -> None:
    client = _Client(error=APIRequestError("boom", status_code=500))
    with pytest.raises(APIRequestError):
        create_cert_from_file(client, *_write_material(tmp_path))
