from deploy_sdk.certs.create import CertResult, create_cert_for_cns, create_cert_from_file
from deploy_sdk.certs.errors import CertError
from deploy_sdk.certs.schemas import Certificate

__all__ = [
    "Certificate",
    "CertError",
    "CertResult",
    "create_cert_for_cns",
    "create_cert_from_file",
]
