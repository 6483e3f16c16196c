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

from typing import (Iterable, Iterator)

from ..core.registers import RegisterValue

def format_register_values(values: Iterable[RegisterValue]) -> Iterator[str]:
    """@brief Generate one `name = value` line per register value.

    Names are left aligned in a column wide enough for the longest name. Registers with no value are
    shown as `-`. The instruction and stack pointers are marked.
    """
    values = list(values)
    width = max((len(v.name) for v in values), default=0)
    for v in values:
        line = f"{v.name:<{width}} = {v.value or '-'}"
        if v.is_instruction_pointer:
            line += "  <ip>"
        elif v.is_stack_pointer:
            line += "  <sp>"
        yield line
