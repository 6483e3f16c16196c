# stubcodec
# Copyright (c) 2026 stubcodec developers
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from typing import List

from ..core.exceptions import MalformedEncoding
from ..utility.mask import is_hex_digits

LOG = logging.getLogger(__name__)

class RunLengthDecoder:
    """@brief Decoder for the run-length encoding with a two digit repeat count.

    A run is written as the repeated character followed by `*` and a repeat count of exactly two hex
    digits. The count is the number of copies of the character to add after the one already present,
    so `a*03` expands to `aaaa`. The character repeated is the one written immediately before the
    marker in the encoded text.

    This encoding is used by Cisco stubs, which compress register and memory replies heavily. Other
    stubs of the protocol family use a single count character and are not handled here.
    """

    ## Run marker character.
    MARKER = '*'

    ## Number of hex digits in a repeat count.
    COUNT_DIGITS = 2

    def decode(self, encoded: str) -> str:
        """@brief Expand run-length encoded text.

        @param self
        @param encoded Reply text, already stripped of packet framing.
        @return The expanded text. Text without run markers is returned unchanged.
        @exception MalformedEncoding The text starts with a run marker, a run count is truncated or
            not hexadecimal, or a run count is zero.
        """
        result: List[str] = []
        length = len(encoded)
        i = 0
        while i < length:
            c = encoded[i]
            if c != self.MARKER:
                result.append(c)
                i += 1
                continue

            if i == 0:
                raise MalformedEncoding("run marker without a preceding character", offset=i)
            if i + self.COUNT_DIGITS >= length:
                raise MalformedEncoding("truncated run count", offset=i)

            digits = encoded[i + 1:i + 1 + self.COUNT_DIGITS]
            if not is_hex_digits(digits):
                raise MalformedEncoding(f"invalid run count '{digits}'", offset=i)
            repeat = int(digits, 16)
            if repeat == 0:
                raise MalformedEncoding("zero run count", offset=i)

            result.append(encoded[i - 1] * repeat)
            i += 1 + self.COUNT_DIGITS

        expanded = "".join(result)
        LOG.debug("run-length decoded %d chars to %d chars", length, len(expanded))
        return expanded
