# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

import logging
from abc import ABC, abstractmethod
from typing import Tuple

from fido2.ctap import CtapDevice, CtapError
from fido2.ctap1 import APDU, ApduError, Ctap1

from pyu2fhost.exceptions import TransportError

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Exchanges complete U2F command APDUs with a single device."""

    @abstractmethod
    def send_apdu(self, ins: int, p1: int, p2: int, data: bytes) -> Tuple[int, bytes]:
        """
        Send one command and block until the device answers.

        Returns the status word and the response body. Failures of the
        exchange itself are raised, usually as `TransportError`.
        """
        ...


class CtapTransport(Transport):
    """Transport over an already opened CTAP device, using U2F raw messages."""

    def __init__(self, device: CtapDevice) -> None:
        self.device = device
        self.ctap1 = Ctap1(device)

    def send_apdu(self, ins: int, p1: int, p2: int, data: bytes) -> Tuple[int, bytes]:
        try:
            return APDU.OK, self.ctap1.send_apdu(ins=ins, p1=p1, p2=p2, data=data)
        except ApduError as e:
            logger.debug(f"Device returned status {e.code:04x}")
            return e.code, e.data
        except (OSError, CtapError) as e:
            raise TransportError(f"exchange with device failed: {e}") from e
