from dataclasses import dataclass

from payments.endpoints import ApiFamily
from payments.errors import ClassifiedError, GatewayError
from payments.fields import FieldMultimap


@dataclass(frozen=True)
class RawResponse:
    """
    One parsed gateway exchange.

    ``status`` is the ``ACK`` value for the NVP family and the ``RESULT`` value
    for Payflow. ``error`` is set exactly when the response was classified as
    a failure.
    """

    family: ApiFamily
    fields: FieldMultimap
    status: str = ""
    message: str = ""
    correlation_id: str = ""
    timestamp: str = ""
    version: str = ""
    build: str = ""
    used_sandbox: bool = False
    error: ClassifiedError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_ack(self) -> None:
        """Raise GatewayError if the gateway reported a failure."""
        if self.error is not None:
            raise GatewayError(self.error, response=self)
