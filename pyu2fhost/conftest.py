# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

import logging
from typing import List, Optional, Tuple

import pytest
from fido2.utils import websafe_encode

from pyu2fhost.u2f.messages import AuthenticateRequest
from pyu2fhost.u2f.transport import Transport

logger = logging.getLogger("main")
log = logger.debug

CHALLENGE = "e0"
APP_ID = "https://example.com"
FACET = "https://example.com"
KEY_HANDLE_RAW = b"abc"
KEY_HANDLE = websafe_encode(KEY_HANDLE_RAW)
STATUS_OK = 0x9000
STATUS_CONDITIONS_NOT_SATISFIED = 0x6985
STATUS_WRONG_DATA = 0x6A80
# flags: user present, counter: 0x2a
AUTHENTICATOR_PREFIX = b"\x01\x00\x00\x00\x2a"
SIGNATURE = bytes.fromhex(
    "3045022100d8f2c5a1a3a6d1b8a5e4a7d1e3f9b0a4c5d6e7f8091a2b3c4d5e6f708192a3b4"
    "02201f2e3d4c5b6a79880f1e2d3c4b5a69788796a5b4c3d2e1f0a9b8c7d6e5f4a3b2"
)


class ScriptedTransport(Transport):
    """Answers every command with the same status and body, or raises `error`."""

    def __init__(
        self,
        status: int = STATUS_OK,
        data: bytes = b"",
        error: Optional[Exception] = None,
    ) -> None:
        self.status = status
        self.data = data
        self.error = error
        self.calls: List[Tuple[int, int, int, bytes]] = []

    def send_apdu(self, ins: int, p1: int, p2: int, data: bytes) -> Tuple[int, bytes]:
        log(f"scripted transport: ins={ins:02x} p1={p1:02x} p2={p2:02x} {data.hex()}")
        self.calls.append((ins, p1, p2, data))
        if self.error is not None:
            raise self.error
        return self.status, self.data


@pytest.fixture(scope="function")
def auth_request() -> AuthenticateRequest:
    return AuthenticateRequest(
        challenge=CHALLENGE,
        app_id=APP_ID,
        key_handle=KEY_HANDLE,
        facet=FACET,
    )


@pytest.fixture(scope="function")
def signing_transport() -> ScriptedTransport:
    return ScriptedTransport(STATUS_OK, AUTHENTICATOR_PREFIX + SIGNATURE)
