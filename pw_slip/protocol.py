# Copyright 2026 The Pigweed Authors
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.
"""Module for low-level SLIP (RFC 1055) protocol features."""

# Special character that marks the start of a SLIP packet.
END = 0xC0

# Special character for escaping other special characters in a packet.
ESC = 0xDB

# Transposed characters that follow ESC in place of END and ESC.
ESC_END = 0xDC
ESC_ESC = 0xDD

_UNESCAPES = {ESC_END: END, ESC_ESC: ESC}

# Byte sequences written in place of END and ESC within a packet.
ESCAPED_END = bytes([ESC, ESC_END])
ESCAPED_ESC = bytes([ESC, ESC_ESC])

VALID_ESCAPED_BYTES = frozenset(_UNESCAPES)


class SlipError(Exception):
    """Base class for errors raised by pw_slip."""


def unescape(byte: int) -> int:
    """Returns the END or ESC byte represented by an escape code."""
    return _UNESCAPES[byte]


def as_bytes(data) -> bytes:
    """Copies bytes-like data or an iterable of byte values into bytes."""
    # bytes(int) is a zero-filled buffer, not a packet.
    if isinstance(data, int):
        raise TypeError('expected bytes or an iterable of ints, not '
                        f'{type(data).__name__}')

    return bytes(data)
