# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

"""Python library for the U2F authenticate message codec."""


__all__ = ["cli", "confconsts", "exceptions", "helpers", "u2f"]
