"""deploy SDK public surface."""

from deploy_sdk.certs import (
    Certificate,
    CertError,
    CertResult,
    create_cert_for_cns,
    create_cert_from_file,
)
from deploy_sdk.client import APIClient
from deploy_sdk.errors import (
    APIRequestError,
    APIUnavailableError,
    DeploySDKError,
    NotAuthorized,
    TeamDeleted,
)
from deploy_sdk.scope import Scope, get_scope

__all__ = [
    "DeploySDKError",
    "APIUnavailableError",
    "APIRequestError",
    "NotAuthorized",
    "TeamDeleted",
    "APIClient",
    "Scope",
    "get_scope",
    "Certificate",
    "CertError",
    "CertResult",
    "create_cert_for_cns",
    "create_cert_from_file",
]
