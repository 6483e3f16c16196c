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
from typing import (Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple)

from ..utility.register import Bitfield

LOG = logging.getLogger(__name__)

class RegisterDescriptor(NamedTuple):
    """@brief Description of one register exposed by a target profile.

    A _size_ of 0 marks a register that has no slot of its own in a register dump; its value is always
    derived from another register.
    """
    name: str
    size: int
    editable: bool = True

    @property
    def is_derived(self) -> bool:
        return self.size == 0

class CompositeField(NamedTuple):
    """@brief Maps a derived register name to a bitfield of a composite parent register."""
    name: str
    parent: str
    field: Bitfield

    @property
    def shift(self) -> int:
        return self.field.shift

    @property
    def width(self) -> int:
        return self.field.width

class RegisterValue:
    """@brief Value of one register from a register dump.

    The value is kept as the hex digit string it was received as. Derived sub-field values are
    rendered as unpadded lowercase hex.
    """
    __slots__ = ('_name', '_value', '_is_instruction_pointer', '_is_stack_pointer')

    def __init__(
                self,
                name: str,
                value: str,
                is_instruction_pointer: bool = False,
                is_stack_pointer: bool = False
            ) -> None:
        self._name = name
        self._value = value
        self._is_instruction_pointer = is_instruction_pointer
        self._is_stack_pointer = is_stack_pointer

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        """@brief Raw hex digits of the value. Empty if the register has no value."""
        return self._value

    @property
    def is_instruction_pointer(self) -> bool:
        return self._is_instruction_pointer

    @property
    def is_stack_pointer(self) -> bool:
        return self._is_stack_pointer

    def __int__(self) -> int:
        """@brief Integer value of the register.
        @exception ValueError The register has no value.
        """
        return int(self._value, 16)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RegisterValue) \
            and (self._name, self._value, self._is_instruction_pointer, self._is_stack_pointer) \
                == (other._name, other._value, other._is_instruction_pointer, other._is_stack_pointer)

    __hash__ = None # type:ignore

    def __repr__(self) -> str:
        flags = ""
        if self._is_instruction_pointer:
            flags += " ip"
        if self._is_stack_pointer:
            flags += " sp"
        return f"<{type(self).__name__} {self._name}={self._value!r}{flags}>"

class RegisterLayout:
    """@brief Ordered catalog of the registers exposed by one target profile.

    The order of the catalog is the order of registers in a register dump. The byte offset of a
    register is the sum of the sizes of all registers before it, and each byte is two hex digits on
    the wire.

    Derived registers (size 0) are listed after the hardware registers. Each derived register may be
    described by a CompositeField that names the parent register and bitfield it is extracted from.

    Layouts are not modified after construction.
    """

    def __init__(
                self,
                descriptors: Iterable[RegisterDescriptor],
                composites: Iterable[CompositeField] = (),
                instruction_pointer: Optional[str] = None,
                stack_pointer: Optional[str] = None
            ) -> None:
        """@brief Constructor.
        @param self
        @param descriptors Iterable of RegisterDescriptor in dump order.
        @param composites Iterable of CompositeField for derived registers.
        @param instruction_pointer Name of the instruction pointer register.
        @param stack_pointer Name of the stack pointer register.
        @exception ValueError Duplicate names, or a composite field or pointer name that doesn't
            match the descriptors.
        """
        self._descriptors: Tuple[RegisterDescriptor, ...] = tuple(descriptors)
        self._index_map: Dict[str, int] = {}
        self._offset_map: Dict[str, int] = {}

        offset = 0
        for index, desc in enumerate(self._descriptors):
            if desc.name in self._index_map:
                raise ValueError(f"duplicate register name '{desc.name}'")
            self._index_map[desc.name] = index
            self._offset_map[desc.name] = offset
            offset += desc.size
        self._wire_size = offset

        self._composites: Dict[str, CompositeField] = {}
        for composite in composites:
            if composite.name in self._composites:
                raise ValueError(f"duplicate composite field '{composite.name}'")
            child = self.get(composite.name)
            if (child is None) or not child.is_derived:
                raise ValueError(f"composite field '{composite.name}' must be a derived register")
            parent = self.get(composite.parent)
            if (parent is None) or parent.is_derived:
                raise ValueError(f"parent '{composite.parent}' of '{composite.name}' must be a "
                                 "hardware register")
            self._composites[composite.name] = composite

        for pointer in (instruction_pointer, stack_pointer):
            if (pointer is not None) and (pointer not in self._index_map):
                raise ValueError(f"unknown register '{pointer}'")
        self._instruction_pointer = instruction_pointer
        self._stack_pointer = stack_pointer

        LOG.debug("register layout: %d registers, %d bytes, %d composite fields",
                len(self._descriptors), self._wire_size, len(self._composites))

    def catalog(self) -> Sequence[RegisterDescriptor]:
        """@brief Ordered sequence of all register descriptors."""
        return self._descriptors

    @property
    def wire_size(self) -> int:
        """@brief Number of bytes a register dump must contain."""
        return self._wire_size

    @property
    def instruction_pointer(self) -> Optional[str]:
        return self._instruction_pointer

    @property
    def stack_pointer(self) -> Optional[str]:
        return self._stack_pointer

    @property
    def composites(self) -> List[CompositeField]:
        """@brief Composite fields in catalog order."""
        return [self._composites[d.name] for d in self._descriptors if d.name in self._composites]

    @property
    def composite_parents(self) -> List[str]:
        """@brief Names of registers that have composite fields, in catalog order."""
        parents = {c.parent for c in self._composites.values()}
        return [d.name for d in self._descriptors if d.name in parents]

    def composite(self, name: str) -> Optional[CompositeField]:
        """@brief Return the CompositeField for a derived register, or None."""
        return self._composites.get(name)

    def get(self, name: str, default: Optional[RegisterDescriptor] = None) -> Optional[RegisterDescriptor]:
        try:
            return self._descriptors[self._index_map[name]]
        except KeyError:
            return default

    def index_of(self, name: str) -> int:
        """@brief Catalog index of a register.
        @exception KeyError Unknown register name.
        """
        try:
            return self._index_map[name]
        except KeyError as err:
            raise KeyError(f"unknown register name {name}") from err

    def offset_of(self, name: str) -> int:
        """@brief Byte offset of a register in a register dump.
        @exception KeyError Unknown register name.
        """
        try:
            return self._offset_map[name]
        except KeyError as err:
            raise KeyError(f"unknown register name {name}") from err

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[RegisterDescriptor]:
        return iter(self._descriptors)

    def __getitem__(self, index: int) -> RegisterDescriptor:
        return self._descriptors[index]

    def __contains__(self, name: object) -> bool:
        return name in self._index_map
