# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

# https://fidoalliance.org/specs/fido-u2f-v1.2-ps-20170411/fido-u2f-raw-message-formats-v1.2-ps-20170411.html


class U2FCommand:
    register = 0x01
    authenticate = 0x02
    version = 0x03


class AuthModifier:
    enforce = 0x03
    check_only = 0x07
    dont_enforce = 0x08


class StatusWord:
    no_error = 0x9000
    wrong_length = 0x6700
    conditions_not_satisfied = 0x6985
    wrong_data = 0x6A80
    ins_not_supported = 0x6D00
    cla_not_supported = 0x6E00


class ClientDataType:
    get_assertion = "navigator.id.getAssertion"
    webauthn_get = "webauthn.get"


# flags (1) + counter (4) prefix of a successful authenticate response
AUTHENTICATOR_PREFIX_LENGTH = 5
MAX_KEY_HANDLE_LENGTH = 0xFF
CHANNEL_ID_UNUSED = "unused"
