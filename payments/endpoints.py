from enum import Enum

NVP_SANDBOX_URL = "https://api-3t.sandbox.paypal.com/nvp"
NVP_PRODUCTION_URL = "https://api-3t.paypal.com/nvp"
PAYFLOW_SANDBOX_URL = "https://pilot-payflowpro.paypal.com"
PAYFLOW_PRODUCTION_URL = "https://payflowpro.paypal.com"


class ApiFamily(str, Enum):
    nvp = "nvp"  # PayPal Classic NVP
    payflow = "payflow"  # Payflow Pro gateway


_ENDPOINTS = {
    (ApiFamily.nvp, True): NVP_SANDBOX_URL,
    (ApiFamily.nvp, False): NVP_PRODUCTION_URL,
    (ApiFamily.payflow, True): PAYFLOW_SANDBOX_URL,
    (ApiFamily.payflow, False): PAYFLOW_PRODUCTION_URL,
}


def resolve_endpoint(family: ApiFamily, sandbox: bool) -> str:
    """Base URL for an API family in sandbox or production mode."""
    return _ENDPOINTS[(ApiFamily(family), bool(sandbox))]
