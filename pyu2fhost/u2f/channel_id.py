# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

from typing import Any, Dict, Optional, Union

from cryptography.hazmat.primitives.asymmetric import ec
from fido2.utils import websafe_encode

from pyu2fhost.exceptions import ChannelIdError
from pyu2fhost.u2f.commands import CHANNEL_ID_UNUSED

P256_COORDINATE_LENGTH = 32

ChannelId = Union[str, Dict[str, str]]


def resolve_channel_id(public_key: Optional[Any], unused: bool) -> Optional[ChannelId]:
    """
    Resolve the `cid_pubkey` member of the client data.

    A P-256 public key is returned as a JSON web key, `unused` marks a client
    supporting channel ids on a connection without one, and `None` means the
    member is left out of the client data entirely.
    """
    if public_key is None:
        if unused:
            return CHANNEL_ID_UNUSED
        return None

    if not isinstance(public_key, ec.EllipticCurvePublicKey):
        raise ChannelIdError(
            f"channel id key must be an EC public key, got {type(public_key).__name__}"
        )
    if not isinstance(public_key.curve, ec.SECP256R1):
        raise ChannelIdError(
            f"channel id key must be on P-256, got {public_key.curve.name}"
        )

    numbers = public_key.public_numbers()
    return {
        "kty": "EC",
        "crv": "P-256",
        "x": websafe_encode(numbers.x.to_bytes(P256_COORDINATE_LENGTH, "big")),
        "y": websafe_encode(numbers.y.to_bytes(P256_COORDINATE_LENGTH, "big")),
    }
