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

from __future__ import annotations

import collections.abc
from typing import (Any, Dict, Iterator, List, Optional, Tuple, Type, Union)
from typing_extensions import Self

from .mask import (bitmask, bit_invert, is_hex_digits)

class Bitfield:
    """@brief Bitfield descriptor.

    Represents one bitfield of a register. Primarily intended to be used as a descriptor for bitfields
    within a RegisterDefinition subclass. It can also be used on its own for simple uses.

    Bit 0 is the least significant bit of the register. A multi-bit field occupies the contiguous range
    from its LSB (the `.shift`) up to and including its MSB.
    """
    __slots__ = ('_msb', '_lsb', '_name', '_register_width', '_mask')

    def __init__(
                self,
                msb: int,
                lsb: Optional[int] = None,
                name: Optional[str] = None,
                register_width: int = 32
            ) -> None:
        """@brief Constructor.
        @param self
        @param msb Most significant bit.
        @param lsb Least significant bit.
        @param name Optional name for the bitfield.
        @param register_width Width in bits of the containing register. Defaults to 32 if not specified.
        """
        assert msb >= (lsb or msb)
        assert msb < register_width
        self._msb = msb
        self._lsb = lsb if (lsb is not None) else msb
        self._name = name or "(unnamed)"
        self._register_width = register_width
        self._mask = bitmask((self._msb, self._lsb))

    @property
    def width(self) -> int:
        """@brief Width of the bitfield."""
        return self._msb - self._lsb + 1

    @property
    def mask(self) -> int:
        """@brief Pre-shifted mask of the bitfield."""
        return self._mask

    @property
    def shift(self) -> int:
        """@brief Value of the least-significant bit of the bitfield."""
        return self._lsb

    @property
    def lsb(self) -> int:
        """@brief Lowest bit position of the bitfield, same as `.shift`."""
        return self._lsb

    @property
    def msb(self) -> int:
        """@brief Highest bit position of the bitfield."""
        return self._msb

    @property
    def name(self) -> str:
        """@brief The bitfield's name."""
        return self._name

    @property
    def register_width(self) -> int:
        return self._register_width

    def __eq__(self, o: object) -> bool:
        """@brief Equality operator."""
        return isinstance(o, Bitfield) and (self.mask == o.mask) and (self.width == o.width)

    def get(self, register_value: int) -> int:
        """@brief Extract the bitfield value from a register value.
        @param self The Bitfield object.
        @param register_value Integer register value.
        @return Integer value of the bitfield extracted from `value`.
        """
        return (register_value & self._mask) >> self._lsb

    def __get__(self, obj: Optional[object], objtype: Optional[type] = None) -> Union[Self, int]:
        """@brief Descriptor get operation."""
        # When called on the class, return ourself.
        if obj is None:
            return self
        else:
            return self.get(obj.value) # type:ignore

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name} {self._msb}:{self._lsb}>"


class _RegisterDefinitionMeta(type):
    """@brief Metaclass for register definitions.

    The role of this metaclass is to convert bitfield declarations in the class definition to Bitfield
    descriptor instances. It also provides the read-only class properties of a register definition.
    """
    def __new__(
                mcs: Type, # type:ignore
                clsname: str,
                bases: Tuple[type, ...],
                objdict: Dict[str, Any],
                **kwds: Any
            ) -> _RegisterDefinitionMeta:
        # Don't process the RegisterDefinition class that is used as the actual base of register definitions.
        if clsname == 'RegisterDefinition':
            return super().__new__(mcs, clsname, bases, objdict)

        classdict: Dict[str, Any] = {}
        classdict['_name'] = kwds.get('name', clsname.lower())

        width = kwds.get('width', 32)
        if width not in {8, 16, 32, 64}:
            raise TypeError(f"invalid register width {width} for {clsname}")
        classdict['_width'] = width

        fields: List[Bitfield] = []
        classdict['_fields'] = fields

        # Create bitfield descriptors.
        for k, v in objdict.items():
            # Copy special attributes.
            if k.startswith('__'):
                classdict[k] = v
                continue
            # Single-bit bitfield.
            elif isinstance(v, int) and not isinstance(v, bool):
                msb = lsb = v
            # Bit range.
            elif isinstance(v, collections.abc.Sequence) and not isinstance(v, str):
                if not all(isinstance(e, int) for e in v):
                    raise TypeError(f"invalid bitfield definition '{v}'; sequence elements must be all int")
                if len(v) == 1:
                    msb = lsb = v[0]
                elif len(v) == 2:
                    msb, lsb = v
                else:
                    raise TypeError(f"invalid bitfield definition '{v}'; sequence must be 1 or 2 elements")
            # Copy any other attributes
            else:
                classdict[k] = v
                continue

            # Define the bitfield descriptor.
            bf = Bitfield(msb, lsb, name=k, register_width=width)
            fields.append(bf)
            classdict[k] = bf

        fields.sort(key=lambda f: (f.lsb, f.msb))

        # Build the reserved bits mask. Fields may overlap.
        defined_mask = 0
        for f in fields:
            defined_mask |= f.mask
        classdict['_reserved_mask'] = bit_invert(defined_mask, width)

        return type.__new__(mcs, clsname, bases, classdict)

    @property
    def name(cls) -> str:
        """@brief Name of the register."""
        return cls._name # type:ignore

    @property
    def fields(cls) -> List[Bitfield]:
        """@brief List of the register fields sorted by LSB."""
        return cls._fields # type:ignore

    @property
    def reserved_mask(cls) -> int:
        """@brief Mask with 1s for all the undefined, reserved bits in the register."""
        return cls._reserved_mask # type:ignore

    @property
    def width(cls) -> int:
        """@brief Width of the register in bits."""
        return cls._width # type:ignore


class RegisterDefinition(metaclass=_RegisterDefinitionMeta):
    """@brief Superclass for register definitions.

    Bitfields of the register are declared as class attributes whose value indicates the bit position
    or range. Values can be either a single int to declare a single-bit field, or a bi-tuple (or list)
    containing the MSB and LSB, respectively, of the bitfield.

    The bitfields listed in the class definition are converted to Bitfield instances.

    Class definition parameters:
    - _width_: Width of the register in bits. Defaults to 32 if not specified.
    - _name_: Register name as it appears in a register dump. Defaults to the lowercased class name.

    Example of the PowerPC XER register with the fields reported by a debug stub:

    ```py
    class XER(RegisterDefinition):
        SO = 0
        OV = 1
        CA = 2
        BYTECOUNT = (29, 24)
    ```

    ### Usage

    ```py
    >>> XER.BYTECOUNT.mask
    1056964608
    >>> r = XER.from_hex("03000005")
    >>> r.SO, r.CA, r.BYTECOUNT
    (1, 1, 3)
    ```
    """
    __slots__ = ('_value',)

    def __init__(self, value: int) -> None:
        """@brief Constructs a register instance with a value."""
        self._value = value

    @classmethod
    def from_hex(cls, text: str) -> Self:
        """@brief Create a register instance from a string of hex digits.
        @exception ValueError The text is empty or contains a non-hex character.
        """
        if not is_hex_digits(text):
            raise ValueError(f"invalid hex value '{text}' for register {cls.name}")
        return cls(int(text, 16))

    @property
    def value(self) -> int:
        """@brief Get the register instance's value."""
        return self._value

    def __index__(self) -> int:
        """@brief Convert a register instance to int."""
        return self._value

    def iter_fields(self) -> Iterator[Tuple[Bitfield, int]]:
        """@brief Iterate over (bitfield, value) pairs in LSB order."""
        for field in type(self).fields:
            yield field, field.get(self._value)

    def __repr__(self) -> str:
        cls = type(self)
        return f"<{cls.name} ={self._value:0{cls.width // 4}x}>"
