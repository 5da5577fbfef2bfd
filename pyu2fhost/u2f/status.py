# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

from typing import Dict, Type

from pyu2fhost.exceptions import (
    BadKeyHandleError,
    ProtocolStatusError,
    UserPresenceRequiredError,
)
from pyu2fhost.u2f.commands import StatusWord

STATUS_NAMES = {
    0x6400: "UnspecifiedNonpersistentExecutionError",
    0x6500: "UnspecifiedPersistentExecutionError",
    0x6700: "WrongLength",
    0x6982: "SecurityStatusNotSatisfied",
    0x6983: "OperationBlocked",
    0x6985: "ConditionsOfUseNotSatisfied",
    0x6A80: "IncorrectDataParameter",
    0x6A81: "FunctionNotSupported",
    0x6A86: "IncorrectP1OrP2Parameter",
    0x6D00: "InstructionNotSupportedOrInvalid",
    0x6E00: "ClassNotSupported",
    0x6F00: "UnspecifiedCheckingError",
    0x9000: "Success",
}

_STATUS_ERRORS: Dict[int, Type[ProtocolStatusError]] = {
    StatusWord.conditions_not_satisfied: UserPresenceRequiredError,
    StatusWord.wrong_data: BadKeyHandleError,
}


def status_name(status: int) -> str:
    """
    >>> status_name(0x6985)
    'ConditionsOfUseNotSatisfied'
    >>> status_name(0x1234)
    'Unknown SW code'
    """
    return STATUS_NAMES.get(status, "Unknown SW code")


def translate_status(status: int) -> ProtocolStatusError:
    """Map a non-success status word to the matching protocol error.

    The error is returned, not raised, so the caller decides where the
    traceback starts.

    >>> translate_status(0x6A80)
    BadKeyHandleError(code=6a80/IncorrectDataParameter)
    >>> translate_status(0x6F00)
    ProtocolStatusError(code=6f00/UnspecifiedCheckingError)
    """
    error_cls = _STATUS_ERRORS.get(status, ProtocolStatusError)
    return error_cls(status, "Device returned status")
