# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

"""
U2F authenticate message codec.

Builds the request message of an U2F_AUTHENTICATE command and interprets
the device answer, either as an U2F sign response or as a WebAuthn
assertion.
"""

import base64
import binascii
import dataclasses
import logging
import re
from typing import Tuple

from fido2.utils import sha256, websafe_decode, websafe_encode

from pyu2fhost.exceptions import (
    BadKeyHandleError,
    DecodingError,
    RequestError,
    UserPresenceRequiredError,
)
from pyu2fhost.u2f.channel_id import resolve_channel_id
from pyu2fhost.u2f.commands import (
    AUTHENTICATOR_PREFIX_LENGTH,
    MAX_KEY_HANDLE_LENGTH,
    AuthModifier,
    ClientDataType,
    StatusWord,
    U2FCommand,
)
from pyu2fhost.u2f.messages import (
    AuthenticateRequest,
    AuthenticateResponse,
    ClientData,
    LegacyAuthenticateResponse,
    WebAuthnAuthenticateResponse,
)
from pyu2fhost.u2f.status import translate_status
from pyu2fhost.u2f.transport import Transport

logger = logging.getLogger(__name__)

WEBSAFE_ALPHABET = re.compile(r"^[A-Za-z0-9_-]*={0,2}$")


def decode_key_handle(key_handle: str) -> bytes:
    if not WEBSAFE_ALPHABET.match(key_handle):
        raise DecodingError("key handle", "invalid character in URL-safe base64")
    try:
        return websafe_decode(key_handle)
    except (binascii.Error, ValueError) as e:
        raise DecodingError("key handle", str(e)) from e


def build_authenticate_request(request: AuthenticateRequest) -> Tuple[bytes, bytes]:
    """
    Returns the client data JSON and the request message:

        SHA-256(client data) (32) | SHA-256(app id) (32) | L (1) | key handle (L)
    """
    cid = resolve_channel_id(request.channel_id_public_key, request.channel_id_unused)

    key_handle = decode_key_handle(request.key_handle)
    if not key_handle or len(key_handle) > MAX_KEY_HANDLE_LENGTH:
        raise RequestError(
            f"key handle must be 1 to {MAX_KEY_HANDLE_LENGTH} bytes long, "
            f"got {len(key_handle)}"
        )
    if not request.challenge:
        raise RequestError("challenge must not be empty")
    if not request.app_id:
        raise RequestError("app id must not be empty")

    if request.webauthn:
        typ = ClientDataType.webauthn_get
    else:
        typ = ClientDataType.get_assertion
    client_data = ClientData(
        typ=typ,
        challenge=request.challenge,
        origin=request.facet,
        cid_pubkey=cid,
    ).to_json()

    payload = (
        sha256(client_data)
        + sha256(request.app_id.encode())
        + bytes([len(key_handle)])
        + key_handle
    )
    return client_data, payload


def parse_authenticate_response(
    status: int,
    response: bytes,
    client_data: bytes,
    key_handle: str,
    app_id: str,
    webauthn: bool,
) -> AuthenticateResponse:
    if status != StatusWord.no_error:
        raise translate_status(status)

    if not webauthn:
        return LegacyAuthenticateResponse(
            key_handle=key_handle,
            client_data=websafe_encode(client_data),
            signature_data=websafe_encode(response),
        )

    if len(response) < AUTHENTICATOR_PREFIX_LENGTH:
        raise DecodingError(
            "authenticator response",
            f"expected at least {AUTHENTICATOR_PREFIX_LENGTH} bytes, "
            f"got {len(response)}",
        )
    prefix, signature = (
        response[:AUTHENTICATOR_PREFIX_LENGTH],
        response[AUTHENTICATOR_PREFIX_LENGTH:],
    )
    authenticator_data = sha256(app_id.encode()) + prefix
    return WebAuthnAuthenticateResponse(
        key_handle=key_handle,
        client_data=websafe_encode(client_data),
        signature_data=base64.b64encode(signature).decode(),
        authenticator_data=base64.b64encode(authenticator_data).decode(),
    )


def authenticate(
    transport: Transport, request: AuthenticateRequest
) -> AuthenticateResponse:
    client_data, payload = build_authenticate_request(request)

    modifier = AuthModifier.check_only if request.check_only else AuthModifier.enforce
    logger.debug(f"Sending authenticate p1={modifier:02x} {payload.hex()}")
    status, response = transport.send_apdu(
        U2FCommand.authenticate, modifier, 0, payload
    )
    logger.debug(f"Received [{status:04x}] {response.hex()}")

    return parse_authenticate_response(
        status,
        response,
        client_data,
        request.key_handle,
        request.app_id,
        request.webauthn,
    )


def is_key_handle_known(transport: Transport, request: AuthenticateRequest) -> bool:
    """
    Ask the device whether it owns the key handle for the app id, without
    requiring a touch.
    """
    check = dataclasses.replace(request, check_only=True)
    try:
        authenticate(transport, check)
    except UserPresenceRequiredError:
        return True
    except BadKeyHandleError:
        return False
    # a device answering 9000 to a check-only request signed anyway
    return True
