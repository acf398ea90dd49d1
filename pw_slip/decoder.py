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
"""Decoder functions for decoding bytes using the SLIP protocol."""

import enum
import logging
from typing import Iterable, List, Tuple, Union

from pw_slip import protocol

_LOG = logging.getLogger('pw_slip')


class DecodeStatus(enum.Enum):
    """Indicates why a packet could not be decoded."""
    NO_FRAME_START = 'no END character found'
    TRUNCATED_ESCAPE = 'data ends in the middle of an escape sequence'
    INVALID_ESCAPE_SEQUENCE = 'ESC followed by an invalid escape code'


class DecodeError(protocol.SlipError):
    """Raised when data violates the SLIP protocol.

    The offset attribute is the index into the input data at which the
    violation was detected.
    """
    status: DecodeStatus

    def __init__(self, offset: int):
        super().__init__(f'{self.status.value} (at offset {offset})')
        self.offset = offset


class NoFrameStartError(DecodeError):
    status = DecodeStatus.NO_FRAME_START


class TruncatedEscapeError(DecodeError):
    status = DecodeStatus.TRUNCATED_ESCAPE


class InvalidEscapeSequenceError(DecodeError):
    status = DecodeStatus.INVALID_ESCAPE_SEQUENCE


class _State(enum.Enum):
    NORMAL = 0
    ESCAPED = 1


def _decode_packet(data: bytes, start: int) -> bytes:
    """Unescapes data from start up to the next END or the end of data."""
    decoded = bytearray()
    state = _State.NORMAL

    for index in range(start, len(data)):
        byte = data[index]

        if state is _State.NORMAL:
            if byte == protocol.ESC:
                state = _State.ESCAPED
            elif byte == protocol.END:
                return bytes(decoded)
            else:
                decoded.append(byte)
        elif state is _State.ESCAPED:
            if byte not in protocol.VALID_ESCAPED_BYTES:
                raise InvalidEscapeSequenceError(index)

            decoded.append(protocol.unescape(byte))
            state = _State.NORMAL
        else:
            raise AssertionError(f'Invalid decoder state: {state}')

    if state is _State.ESCAPED:
        raise TruncatedEscapeError(len(data))

    return bytes(decoded)


def decode(framed: Union[bytes, Iterable[int]]) -> bytes:
    """Decodes the first SLIP packet in framed.

    Bytes before the first END are left over from an earlier packet and are
    discarded. Decoding stops at the end of the data or at the next unescaped
    END, which starts the following packet.

    Raises:
        NoFrameStartError: framed contains no END character.
        TruncatedEscapeError: framed ends directly after an ESC.
        InvalidEscapeSequenceError: an ESC is followed by a byte other than
            ESC_END or ESC_ESC.
    """
    data = protocol.as_bytes(framed)

    start = data.find(protocol.END)
    if start == -1:
        raise NoFrameStartError(len(data))

    if start:
        _LOG.debug('Discarded %d bytes before the start of the packet', start)

    return _decode_packet(data, start + 1)


def decode_packets(
        data: Union[bytes, Iterable[int]]) -> Tuple[List[bytes], bytes]:
    """Decodes every complete SLIP packet in data.

    A packet is complete once the END that starts the following packet has
    been received. The bytes of the last, possibly incomplete, packet are
    returned undecoded so they can be prepended to the next chunk of data:

    .. code-block:: python

      remainder = b''
      for chunk in chunks:
          packets, remainder = decode_packets(remainder + chunk)

    Empty packets, such as those between the closing and opening END of
    adjacent packets from peers that terminate packets, are skipped. Packets
    that cannot be decoded are logged and discarded, and decoding continues
    with the next packet.

    Returns:
        A list of decoded payloads and the remaining undecoded bytes.
    """
    data = protocol.as_bytes(data)

    start = data.find(protocol.END)
    if start == -1:
        if data:
            _LOG.debug('Discarded %d bytes with no packet start', len(data))
        return [], b''

    if start:
        _LOG.debug('Discarded %d bytes before the start of the packet', start)

    packets: List[bytes] = []
    empty_packets = 0

    end = data.find(protocol.END, start + 1)
    while end != -1:
        if end == start + 1:
            empty_packets += 1
        else:
            try:
                packets.append(_decode_packet(data, start + 1))
            except DecodeError as err:
                _LOG.warning('Failed to decode packet: %s; discarded %d bytes',
                             err, end - start)
                _LOG.debug('Discarded data: %s', data[start:end])

        start = end
        end = data.find(protocol.END, start + 1)

    if empty_packets:
        _LOG.debug('Skipped %d empty packets', empty_packets)

    remainder = data[start:]
    _LOG.debug('Decoded %d packets; %d bytes remain', len(packets),
               len(remainder))
    return packets, remainder
