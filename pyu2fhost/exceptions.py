# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

import dataclasses


class BasePyU2FException(Exception):
    pass


class RequestError(BasePyU2FException, ValueError):
    """The authenticate request violates a precondition of the wire format."""

    pass


class DecodingError(BasePyU2FException):
    """Input could not be decoded.

    `context` names the value that failed, e.g. "key handle".
    """

    def __init__(self, context: str, reason: str) -> None:
        super().__init__(f"{context}: {reason}")
        self.context = context
        self.reason = reason


class EncodingError(BasePyU2FException):
    def __init__(self, context: str, reason: str) -> None:
        super().__init__(f"error encoding {context}: {reason}")
        self.context = context
        self.reason = reason


class ChannelIdError(BasePyU2FException):
    pass


class TransportError(BasePyU2FException):
    """Raised by transports when the exchange with the device fails."""

    pass


@dataclasses.dataclass
class ProtocolStatusError(BasePyU2FException):
    code: int
    context: str = "Received error"

    @property
    def name(self) -> str:
        from pyu2fhost.u2f.status import status_name

        return status_name(self.code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code:04x}/{self.name})"

    def __str__(self) -> str:
        return f"{self.context}: {self.code:04x} ({self.name})"


class UserPresenceRequiredError(ProtocolStatusError):
    """The device requires a touch, or owns the key handle of a check-only request."""

    pass


class BadKeyHandleError(ProtocolStatusError):
    """The key handle was not created by this device for the given app id."""

    pass
