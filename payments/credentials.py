"""
Merchant API credentials.

Each credential type knows which protocol fields it contributes to a request.
Secrets are left out of ``repr`` so clients and credentials can be logged or
printed without leaking them.
"""

from dataclasses import dataclass, field

from payments.endpoints import ApiFamily
from payments.errors import CredentialsError


@dataclass(frozen=True)
class SignatureCredentials:
    """API username/password/signature triple for the PayPal NVP API."""

    username: str
    password: str = field(repr=False)
    signature: str = field(repr=False)

    family = ApiFamily.nvp

    def __post_init__(self):
        _require(self, "username", "password", "signature")

    def as_fields(self, version: str) -> list[tuple[str, str]]:
        return [
            ("USER", self.username),
            ("PWD", self.password),
            ("SIGNATURE", self.signature),
            ("VERSION", version),
        ]


@dataclass(frozen=True)
class PartnerCredentials:
    """Payflow login: user, password, partner and vendor (merchant login)."""

    username: str
    password: str = field(repr=False)
    partner: str
    vendor: str

    family = ApiFamily.payflow

    def __post_init__(self):
        _require(self, "username", "password", "partner", "vendor")

    def as_fields(self, version: str | None = None) -> list[tuple[str, str]]:
        # Payflow does not take an API version field
        return [
            ("USER", self.username),
            ("PWD", self.password),
            ("PARTNER", self.partner),
            ("VENDOR", self.vendor),
        ]


Credentials = SignatureCredentials | PartnerCredentials


def _require(creds, *names: str) -> None:
    missing = [name for name in names if not getattr(creds, name)]
    if missing:
        raise CredentialsError(
            f"{type(creds).__name__} missing required value(s): {', '.join(missing)}"
        )
