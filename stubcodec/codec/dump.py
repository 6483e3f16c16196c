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
from typing import (Dict, List)

from ..core.exceptions import MalformedDump
from ..core.registers import (RegisterLayout, RegisterValue)
from ..utility.mask import is_hex_digits

LOG = logging.getLogger(__name__)

class DumpParser:
    """@brief Converts a flat hex register dump into register values.

    The dump must already be expanded, that is, run-length decoding has been applied. Registers are
    read from the dump in layout order. Derived registers are then computed from the integer value
    of their composite parent register, never from another derived value.
    """

    def parse(self, flat_hex: str, layout: RegisterLayout) -> List[RegisterValue]:
        """@brief Parse a register dump.

        @param self
        @param flat_hex Expanded register dump of hex digits.
        @param layout The RegisterLayout describing the dump.
        @return List with one RegisterValue per register in the layout's catalog, in catalog order.
        @exception MalformedDump The dump is shorter than the layout requires, or a composite parent
            register's value is not hexadecimal. No values are returned in this case.
        """
        required = layout.wire_size * 2
        if len(flat_hex) < required:
            raise MalformedDump("register dump too short", required=required, actual=len(flat_hex))

        # Slice the hardware registers.
        raw: Dict[str, str] = {}
        offset = 0
        for desc in layout:
            if desc.is_derived:
                continue
            raw[desc.name] = flat_hex[offset:offset + desc.size * 2]
            offset += desc.size * 2

        # Integer values of composite parents.
        parents: Dict[str, int] = {}
        for name in layout.composite_parents:
            text = raw[name]
            if not is_hex_digits(text):
                raise MalformedDump(f"register {name} has invalid value '{text}'")
            parents[name] = int(text, 16)

        values: List[RegisterValue] = []
        for desc in layout:
            if not desc.is_derived:
                value = raw[desc.name]
            else:
                composite = layout.composite(desc.name)
                if composite is not None:
                    value = f"{composite.field.get(parents[composite.parent]):x}"
                else:
                    value = ""
            values.append(RegisterValue(
                    desc.name,
                    value,
                    is_instruction_pointer=(desc.name == layout.instruction_pointer),
                    is_stack_pointer=(desc.name == layout.stack_pointer)))

        LOG.debug("parsed %d registers from %d hex digits", len(values), len(flat_hex))
        return values
