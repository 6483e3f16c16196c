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

from ...codec.rle import RunLengthDecoder
from ...core.registers import (CompositeField, RegisterDescriptor, RegisterLayout)
from ..profile import (DebuggerOptions, TargetProfile)
from .ppc_registers import (CR, CR_FIELD_FLAGS, FPSCR, XER)

LOG = logging.getLogger(__name__)

## Number of general purpose registers.
GPR_COUNT = 32

## GPR that is reported under the name of the stack pointer.
SP_GPR = 1

## Hardware registers following the GPRs in a register dump.
SPECIAL_REGISTERS = ('pc', 'msr', 'cr', 'lr', 'ctr', 'xer', 'fpscr')

class Cisco2600(TargetProfile):
    """@brief Profile for the GDB stub of Cisco 2600 series routers.

    The router's PowerPC core has a 32-bit address space. A register dump is 40 words: a leading word
    of unknown meaning, the 32 GPRs, then pc, msr, cr, lr, ctr, xer, and fpscr. The XER, CR, and FPSCR
    registers are further decoded into their fields and flags.

    The stub sends its greet message both on connection and when a breakpoint is hit. Replies are
    compressed with the two-digit variant of run-length encoding.
    """

    NAME = "cisco2600"
    DESCRIPTION = "Cisco 2600 series router (PowerPC)"

    GREET_MESSAGE = "||||"

    def __init__(self) -> None:
        super().__init__()
        self._rle = RunLengthDecoder()

    def _build_layout(self) -> RegisterLayout:
        descriptors: List[RegisterDescriptor] = []
        composites: List[CompositeField] = []

        def add_field(name: str, parent: str, field) -> None:
            descriptors.append(RegisterDescriptor(name, 0))
            composites.append(CompositeField(name, parent, field))

        # Leading word of unknown meaning.
        descriptors.append(RegisterDescriptor("??", 4))
        for i in range(GPR_COUNT):
            descriptors.append(RegisterDescriptor("sp" if i == SP_GPR else f"r{i}", 4))
        for name in SPECIAL_REGISTERS:
            descriptors.append(RegisterDescriptor(name, 4))

        for n in range(8):
            add_field(f"cr{n}", CR.name, getattr(CR, f"CR{n}"))

        add_field("xer_so", XER.name, XER.SO)
        add_field("xer_ov", XER.name, XER.OV)
        add_field("xer_ca", XER.name, XER.CA)
        add_field("xer_bytecount", XER.name, XER.BYTECOUNT)

        for n in range(8):
            for flag in CR_FIELD_FLAGS:
                add_field(f"cr{n}_{flag}", CR.name, getattr(CR, f"CR{n}_{flag}"))

        for field in FPSCR.fields:
            add_field(f"fpscr_{field.name}", FPSCR.name, field)

        return RegisterLayout(descriptors, composites, instruction_pointer="pc", stack_pointer="sp")

    @property
    def address_size(self) -> int:
        return 32

    @property
    def greet_message(self) -> str:
        return self.GREET_MESSAGE

    @property
    def debugger_options(self) -> DebuggerOptions:
        # The router is single threaded, cannot be terminated, and the serial link is too slow for
        # memory maps or memory validation.
        return DebuggerOptions(
                can_terminate=False,
                can_multithread=False,
                can_memmap=False,
                can_validate_memory=False,
                has_stack=False,
                page_size=4096)

    def is_breakpoint_message(self, msg: str) -> bool:
        return msg == self.GREET_MESSAGE

    def decode_run_length(self, encoded: str) -> str:
        return self._rle.decode(encoded)
