# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

import json
from typing import BinaryIO, Optional

import click
from cryptography.hazmat.primitives.serialization import load_pem_public_key
from fido2.utils import websafe_decode, websafe_encode

from pyu2fhost.cli.exceptions import CliException
from pyu2fhost.exceptions import (
    BasePyU2FException,
    DecodingError,
    ProtocolStatusError,
)
from pyu2fhost.helpers import hex_bytes, local_print
from pyu2fhost.u2f.authenticate import (
    build_authenticate_request,
    parse_authenticate_response,
)
from pyu2fhost.u2f.commands import AuthModifier
from pyu2fhost.u2f.messages import AuthenticateRequest


@click.command()
@click.option("--challenge", required=True, help="Challenge issued by the server")
@click.option("--app-id", required=True, help="Application id of the relying party")
@click.option("--key-handle", required=True, help="URL-safe base64 key handle")
@click.option("--facet", help="Origin of the caller, defaults to the app id")
@click.option("--webauthn", is_flag=True, help="Build a WebAuthn client data")
@click.option("--check-only", is_flag=True, help="Only check the key handle")
@click.option(
    "--channel-id-unused",
    is_flag=True,
    help="Mark the channel id as supported but unused",
)
@click.option(
    "--channel-id-key",
    type=click.File("rb"),
    help="PEM file with the P-256 channel id public key",
)
def request(
    challenge: str,
    app_id: str,
    key_handle: str,
    facet: Optional[str],
    webauthn: bool,
    check_only: bool,
    channel_id_unused: bool,
    channel_id_key: Optional[BinaryIO],
) -> None:
    """Build the client data and request message of an authenticate command."""

    public_key = None
    if channel_id_key is not None:
        try:
            public_key = load_pem_public_key(channel_id_key.read())
        except ValueError as e:
            raise CliException(
                f"Could not load channel id key: {e}", support_hint=False
            )

    req = AuthenticateRequest(
        challenge=challenge,
        app_id=app_id,
        key_handle=key_handle,
        facet=facet or app_id,
        channel_id_public_key=public_key,  # type: ignore[arg-type]
        channel_id_unused=channel_id_unused,
        check_only=check_only,
        webauthn=webauthn,
    )
    try:
        client_data, payload = build_authenticate_request(req)
    except (BasePyU2FException, ValueError) as e:
        raise CliException(f"Could not build request: {e}", support_hint=False)

    p1 = AuthModifier.check_only if check_only else AuthModifier.enforce
    local_print(
        json.dumps(
            {
                "clientData": websafe_encode(client_data),
                "p1": p1,
                "payload": payload.hex(),
            },
            indent=2,
        )
    )


@click.command()
@click.option("--status", required=True, help="Status word in hex, e.g. 9000")
@click.option("--data", default="", help="Response body in hex")
@click.option(
    "--client-data", required=True, help="URL-safe base64 client data of the request"
)
@click.option("--key-handle", required=True, help="URL-safe base64 key handle")
@click.option("--app-id", required=True, help="Application id of the relying party")
@click.option("--webauthn", is_flag=True, help="Produce a WebAuthn assertion")
def response(
    status: str,
    data: str,
    client_data: str,
    key_handle: str,
    app_id: str,
    webauthn: bool,
) -> None:
    """Interpret the device answer to an authenticate command."""

    try:
        status_word = int.from_bytes(hex_bytes(status), "big")
        body = hex_bytes(data)
        raw_client_data = websafe_decode(client_data)
    except ValueError as e:
        raise CliException(f"Invalid input: {e}", support_hint=False)

    try:
        resp = parse_authenticate_response(
            status_word, body, raw_client_data, key_handle, app_id, webauthn
        )
    except ProtocolStatusError as e:
        raise CliException(str(e), support_hint=False)
    except DecodingError as e:
        raise CliException(f"Malformed response: {e}", support_hint=False)

    local_print(json.dumps(resp.to_dict(), indent=2))
