# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

import hashlib
import json

from click.testing import CliRunner
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from fido2.utils import websafe_decode, websafe_encode

from pyu2fhost.cli import u2fhost
from pyu2fhost.cli.exceptions import CliException
from pyu2fhost.conftest import (
    APP_ID,
    AUTHENTICATOR_PREFIX,
    CHALLENGE,
    KEY_HANDLE,
    KEY_HANDLE_RAW,
    SIGNATURE,
)


def invoke(*args: str):
    return CliRunner().invoke(u2fhost, list(args))


def test_request():
    result = invoke(
        "request",
        "--challenge",
        CHALLENGE,
        "--app-id",
        APP_ID,
        "--key-handle",
        KEY_HANDLE,
    )

    assert result.exit_code == 0, result.output
    output = json.loads(result.output)
    client_data = websafe_decode(output["clientData"])
    payload = bytes.fromhex(output["payload"])
    assert json.loads(client_data)["origin"] == APP_ID
    assert payload[:32] == hashlib.sha256(client_data).digest()
    assert payload[64:] == bytes([len(KEY_HANDLE_RAW)]) + KEY_HANDLE_RAW
    assert output["p1"] == 0x03


def test_request_check_only_with_channel_id(tmp_path):
    key_file = tmp_path / "cid.pem"
    key_file.write_bytes(
        ec.generate_private_key(ec.SECP256R1())
        .public_key()
        .public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    )

    result = invoke(
        "request",
        "--challenge",
        CHALLENGE,
        "--app-id",
        APP_ID,
        "--key-handle",
        KEY_HANDLE,
        "--check-only",
        "--channel-id-key",
        str(key_file),
    )

    assert result.exit_code == 0, result.output
    output = json.loads(result.output)
    assert output["p1"] == 0x07
    assert json.loads(websafe_decode(output["clientData"]))["cid_pubkey"]["kty"] == "EC"


def test_request_invalid_key_handle():
    result = invoke(
        "request", "--challenge", CHALLENGE, "--app-id", APP_ID, "--key-handle", "a+b"
    )

    assert isinstance(result.exception, CliException)
    assert "key handle" in str(result.exception)


def test_response_webauthn():
    result = invoke(
        "response",
        "--status",
        "9000",
        "--data",
        (AUTHENTICATOR_PREFIX + SIGNATURE).hex(),
        "--client-data",
        websafe_encode(b"{}"),
        "--key-handle",
        KEY_HANDLE,
        "--app-id",
        APP_ID,
        "--webauthn",
    )

    assert result.exit_code == 0, result.output
    output = json.loads(result.output)
    assert set(output) == {
        "keyHandle",
        "clientData",
        "signatureData",
        "authenticatorData",
    }
    assert output["keyHandle"] == KEY_HANDLE


def test_response_error_status():
    result = invoke(
        "response",
        "--status",
        "6985",
        "--client-data",
        websafe_encode(b"{}"),
        "--key-handle",
        KEY_HANDLE,
        "--app-id",
        APP_ID,
    )

    assert isinstance(result.exception, CliException)
    assert "ConditionsOfUseNotSatisfied" in str(result.exception)
