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
"""SLIP (RFC 1055) packet framing.

.. code-block:: python

  import pw_slip

  payload = bytes([0x01, pw_slip.END, 0x02, pw_slip.ESC])
  framed = pw_slip.encode(payload)
  assert pw_slip.decode(framed) == payload
"""

from pw_slip.protocol import END, ESC, ESC_END, ESC_ESC, SlipError
from pw_slip.encoder import EncodeError, encode
from pw_slip.decoder import (
    DecodeError,
    DecodeStatus,
    InvalidEscapeSequenceError,
    NoFrameStartError,
    TruncatedEscapeError,
    decode,
    decode_packets,
)
