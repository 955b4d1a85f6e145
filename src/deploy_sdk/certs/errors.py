"""Certificate creation failures returned as values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CertError:
    code: str
    message: str


def invalid_cert(message: str | None = None) -> CertError:
    return CertError(
        "INVALID_CERT",
        message or "The provided certificate is not valid and can't be added.",
    )


def domain_permission_denied(domain: str, context_name: str) -> CertError:
    return CertError(
        "DOMAIN_PERMISSION_DENIED",
        f"You don't have access to the domain {domain} under {context_name}.",
    )


def too_many_certificates(domains: list[str]) -> CertError:
    return CertError(
        "TOO_MANY_CERTIFICATES",
        "Too many certificates already issued for exact set of domains: "
        f"{', '.join(domains)}",
    )


def too_many_requests(api: str, retry_after: int | None) -> CertError:
    if retry_after:
        message = f"Too many requests detected for {api} API. Try again in {retry_after}s."
    else:
        message = f"Too many requests detected for {api} API. Try again later."
    return CertError("TOO_MANY_REQUESTS", message)


def domain_validation_running(domain: str) -> CertError:
    return CertError(
        "DOMAIN_VALIDATION_RUNNING",
        f"There is a validation in course for {domain}. Wait until it finishes.",
    )


def domains_should_share_root(domains: list[str]) -> CertError:
    return CertError(
        "CNS_SHOULD_SHARE_ROOT",
        f"All given common names should share the same root domain: {', '.join(domains)}",
    )


def cant_solve_challenge(domain: str, challenge_type: str | None) -> CertError:
    kind = challenge_type or "dns-01"
    return CertError(
        "CANT_SOLVE_CHALLENGE",
        f"Can't solve {kind} challenge for domain {domain}",
    )


def invalid_wildcard_domain(domain: str) -> CertError:
    return CertError(
        "INVALID_WILDCARD_DOMAIN",
        f"Invalid domain {domain}. Wildcard domains can only be followed by a root domain.",
    )


def domain_not_found(domain: str) -> CertError:
    return CertError("DOMAIN_NOT_FOUND", f"The domain {domain} can't be found.")


def domain_configuration_error(domain: str) -> CertError:
    return CertError(
        "DOMAIN_CONFIGURATION_ERROR",
        f"The domain {domain} is not configured to point to the platform nameservers.",
    )
