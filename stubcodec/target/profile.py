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
from typing import (List, NamedTuple, Tuple)

from ..codec.dump import DumpParser
from ..core.exceptions import MalformedEncoding
from ..core.registers import (RegisterDescriptor, RegisterLayout, RegisterValue)

LOG = logging.getLogger(__name__)

class DebuggerOptions(NamedTuple):
    """@brief Debugger features supported by a target profile."""
    can_terminate: bool = True
    can_multithread: bool = True
    can_memmap: bool = True
    can_validate_memory: bool = True
    has_stack: bool = True
    page_size: int = 4096

class TargetProfile:
    """@brief Interface for the target-specific parts of a debug stub connection.

    A profile is selected by name when a session starts. Each profile instance builds and owns its
    register layout, so concurrent sessions never share mutable register tables.

    Subclasses must implement the methods that raise NotImplementedError.
    """

    ## Name used to select the profile.
    NAME: str = ""

    ## Human readable description.
    DESCRIPTION: str = ""

    def __init__(self) -> None:
        self._layout = self._build_layout()
        self._parser = DumpParser()

    def _build_layout(self) -> RegisterLayout:
        """@brief Create the register layout for this profile."""
        raise NotImplementedError()

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def address_size(self) -> int:
        """@brief Size of target addresses in bits."""
        raise NotImplementedError()

    @property
    def register_layout(self) -> RegisterLayout:
        return self._layout

    @property
    def instruction_pointer_index(self) -> int:
        """@brief Catalog index of the instruction pointer register."""
        assert self._layout.instruction_pointer is not None
        return self._layout.index_of(self._layout.instruction_pointer)

    @property
    def greet_message(self) -> str:
        """@brief Message sent by the stub when a connection is established."""
        raise NotImplementedError()

    @property
    def debugger_options(self) -> DebuggerOptions:
        return DebuggerOptions()

    def is_breakpoint_message(self, msg: str) -> bool:
        """@brief Whether a stub message reports that a breakpoint was hit."""
        raise NotImplementedError()

    def get_register_descriptions(self) -> List[RegisterDescriptor]:
        """@brief Descriptions of all registers exposed by the target, in dump order."""
        return list(self._layout.catalog())

    def parse_registers(self, flat_hex: str) -> List[RegisterValue]:
        """@brief Parse an expanded register dump.
        @exception MalformedDump
        """
        return self._parser.parse(flat_hex, self._layout)

    def decode_run_length(self, encoded: str) -> str:
        """@brief Undo the stub's run-length encoding.
        @exception MalformedEncoding The encoded text is invalid.
        """
        raise NotImplementedError()

    def run_length_decode(self, encoded: str) -> Tuple[str, bool]:
        """@brief Undo the stub's run-length encoding without raising.

        @return 2-tuple of the expanded text and a success flag. On failure the text is empty.
        """
        try:
            return self.decode_run_length(encoded), True
        except MalformedEncoding as err:
            LOG.debug("failed to decode reply: %s", err)
            return "", False

    def __repr__(self) -> str:
        return f"<{type(self).__name__}@{id(self):#x} {self.NAME}>"
