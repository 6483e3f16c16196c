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

from typing import (Tuple, Union)

def bitmask(*args: Union[int, Tuple[int, int]]) -> int:
    """@brief Returns a mask with specified bit ranges set.

    An integer mask is generated based on the bits and bit ranges specified by the
    arguments. Any number of arguments can be provided. Each argument may be either
    a 2-tuple of integers, or a single int.

    - int: Single bit to set in the mask.
    - 2-tuple: Bit range to set in the mask. The values are the MSB and LSB, in that order,
        of the range, inclusive.

    @return An integer mask.
    """
    mask = 0
    for a in args:
        if isinstance(a, tuple):
            msb, lsb = a
            mask |= ((1 << (msb - lsb + 1)) - 1) << lsb
        else:
            mask |= 1 << a
    return mask

def bit_invert(value: int, width: int = 32) -> int:
    """@brief Return the bitwise inverted value of the argument given a specified width.

    @param value Integer value to be inverted.
    @param width Bit width of both the input and output. If not supplied, this defaults to 32.
    @return Integer of the bitwise inversion of @a value.
    """
    return ((1 << width) - 1) & (~value)

def is_hex_digits(text: str) -> bool:
    """@brief Whether every character of a non-empty string is a hexadecimal digit."""
    return bool(text) and all(c in _HEX_DIGITS for c in text)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
