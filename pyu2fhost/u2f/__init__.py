# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

from pyu2fhost.u2f.authenticate import (
    authenticate,
    build_authenticate_request,
    is_key_handle_known,
    parse_authenticate_response,
)
from pyu2fhost.u2f.messages import (
    AuthenticateRequest,
    AuthenticateResponse,
    LegacyAuthenticateResponse,
    WebAuthnAuthenticateResponse,
)
from pyu2fhost.u2f.transport import CtapTransport, Transport

__all__ = [
    "AuthenticateRequest",
    "AuthenticateResponse",
    "CtapTransport",
    "LegacyAuthenticateResponse",
    "Transport",
    "WebAuthnAuthenticateResponse",
    "authenticate",
    "build_authenticate_request",
    "is_key_handle_known",
    "parse_authenticate_response",
]
