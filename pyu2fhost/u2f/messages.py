# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

import base64
import dataclasses
import json
from struct import unpack
from typing import Any, Dict, Optional, Tuple

from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePublicKey

from pyu2fhost.exceptions import EncodingError
from pyu2fhost.u2f.channel_id import ChannelId

USER_PRESENCE_FLAG = 0x01


@dataclasses.dataclass
class AuthenticateRequest:
    # Server issued challenge, used as is in the client data
    challenge: str
    app_id: str
    # URL-safe base64 without padding, as returned on registration
    key_handle: str
    # Origin of the caller
    facet: str
    channel_id_public_key: Optional[EllipticCurvePublicKey] = None
    channel_id_unused: bool = False
    # Only test whether the device owns the key handle
    check_only: bool = False
    # Produce a WebAuthn assertion instead of a U2F sign response
    webauthn: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthenticateRequest":
        """Create a request from the JSON shape used by the U2F JavaScript API."""
        return cls(
            challenge=data["challenge"],
            app_id=data["appId"],
            key_handle=data["keyHandle"],
            facet=data.get("facet", data["appId"]),
            channel_id_unused=data.get("channelIdUnused", False),
            check_only=data.get("checkOnly", False),
            webauthn=data.get("webAuthn", False),
        )


@dataclasses.dataclass(frozen=True)
class ClientData:
    typ: str
    challenge: str
    origin: str
    cid_pubkey: Optional[ChannelId] = None

    def to_json(self) -> bytes:
        data: Dict[str, Any] = {
            "typ": self.typ,
            "challenge": self.challenge,
            "origin": self.origin,
        }
        if self.cid_pubkey is not None:
            data["cid_pubkey"] = self.cid_pubkey
        try:
            return json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode()
        except (TypeError, ValueError) as e:
            raise EncodingError("client data", str(e)) from e


@dataclasses.dataclass(frozen=True)
class AuthenticateResponse:
    key_handle: str
    # URL-safe base64 of the client data JSON
    client_data: str
    signature_data: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "keyHandle": self.key_handle,
            "clientData": self.client_data,
            "signatureData": self.signature_data,
        }


@dataclasses.dataclass(frozen=True)
class LegacyAuthenticateResponse(AuthenticateResponse):
    """U2F sign response, `signature_data` is the complete device response."""

    pass


@dataclasses.dataclass(frozen=True)
class WebAuthnAuthenticateResponse(AuthenticateResponse):
    """
    WebAuthn assertion. `authenticator_data` is the standard base64 of the
    app id hash followed by the flags byte and the big endian counter,
    `signature_data` the standard base64 of the DER signature.
    """

    authenticator_data: str

    def _flags_and_counter(self) -> Tuple[int, int]:
        raw = base64.b64decode(self.authenticator_data)
        flags, counter = unpack(">BI", raw[32:37])
        return flags, counter

    @property
    def user_present(self) -> bool:
        flags, _ = self._flags_and_counter()
        return bool(flags & USER_PRESENCE_FLAG)

    @property
    def counter(self) -> int:
        _, counter = self._flags_and_counter()
        return counter

    def to_dict(self) -> Dict[str, str]:
        data = super().to_dict()
        data["authenticatorData"] = self.authenticator_data
        return data
