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
"""Encoder function for framing bytes using the SLIP protocol."""

from typing import Iterable, Optional, Union

from pw_slip import protocol

_END = bytes([protocol.END])
_ESC = bytes([protocol.ESC])


class EncodeError(protocol.SlipError):
    """Raised when an encoded packet would exceed the requested size."""
    def __init__(self, size: int, max_size: int):
        super().__init__(
            f'encoded packet is {size} bytes, exceeding the limit of '
            f'{max_size} bytes')
        self.size = size
        self.max_size = max_size


def encode(payload: Union[bytes, Iterable[int]],
           *,
           terminate: bool = False,
           max_size: Optional[int] = None) -> bytes:
    """Escapes the payload and prefixes it with the END character.

    Arguments:
        payload: The raw packet contents. May contain any byte values.
        terminate: Also append an END character, for peers that expect packets
            to be closed as well as opened by END.
        max_size: If set, raise EncodeError instead of returning a packet
            longer than this many bytes.

    Returns:
        The framed packet.
    """
    # Escape ESC first so the ESCs inserted for END are not escaped again.
    body = protocol.as_bytes(payload).replace(_ESC, protocol.ESCAPED_ESC)
    body = body.replace(_END, protocol.ESCAPED_END)

    packet = b''.join([_END, body, _END if terminate else b''])

    if max_size is not None and len(packet) > max_size:
        raise EncodeError(len(packet), max_size)

    return packet
