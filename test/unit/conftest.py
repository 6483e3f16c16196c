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

import pytest
from typing import (Optional, Sequence)

from stubcodec.target.builtin.target_cisco2600 import (Cisco2600, SPECIAL_REGISTERS)

## Number of 32-bit words in a Cisco 2600 register dump.
DUMP_WORDS = 40

def build_dump(words: Sequence[int]) -> str:
    """@brief Render 32-bit words as a flat hex register dump."""
    return "".join(f"{w:08x}" for w in words)

def build_cisco_dump(gprs: Optional[Sequence[int]] = None, **specials: int) -> str:
    """@brief Build a Cisco 2600 dump from GPR values and named special register values."""
    words = [0] * DUMP_WORDS
    for i, value in enumerate(gprs or []):
        words[1 + i] = value
    for name, value in specials.items():
        words[1 + 32 + SPECIAL_REGISTERS.index(name)] = value
    return build_dump(words)

@pytest.fixture(scope='function')
def profile():
    return Cisco2600()

@pytest.fixture(scope='function')
def layout(profile):
    return profile.register_layout

@pytest.fixture(scope='function')
def cisco_dump():
    return build_cisco_dump

@pytest.fixture(scope='function')
def word_dump():
    return build_dump
