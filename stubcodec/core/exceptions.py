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

from typing import (Any, Optional)

class Error(RuntimeError):
    """@brief Parent of all errors stubcodec can raise"""
    pass

class InternalError(Error):
    """@brief Internal consistency or logic error.

    This error indicates that something has happened that shouldn't be possible.
    """
    pass

class TargetSupportError(Error):
    """@brief Error related to target support"""
    pass

class ProtocolError(Error):
    """@brief Data received from the debug stub does not follow the protocol."""
    pass

class MalformedEncoding(ProtocolError):
    """@brief A run-length encoded reply violates the encoding rules.

    The reply cannot be used in part; the caller must discard it. The position of the offending run
    marker can optionally be recorded by passing the 'offset' keyword argument to the constructor. If
    set, the offset is included in the description of the exception.
    """
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args)
        self._offset: Optional[int] = kwargs.get('offset', None)

    @property
    def offset(self) -> Optional[int]:
        return self._offset

    def __str__(self) -> str:
        desc = super().__str__() or "Malformed run-length encoding"
        if self._offset is not None:
            desc += f" (at offset {self._offset})"
        return desc

class MalformedDump(ProtocolError):
    """@brief A register dump cannot be parsed with the register layout.

    Usually raised because the dump is too short for the layout. The number of hex digits the layout
    requires and the number actually received can be recorded with the 'required' and 'actual'
    keyword arguments.
    """
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args)
        self._required: Optional[int] = kwargs.get('required', None)
        self._actual: Optional[int] = kwargs.get('actual', None)

    @property
    def required(self) -> Optional[int]:
        return self._required

    @property
    def actual(self) -> Optional[int]:
        return self._actual

    def __str__(self) -> str:
        desc = super().__str__() or "Malformed register dump"
        if (self._required is not None) and (self._actual is not None):
            desc += f" ({self._actual} of {self._required} hex digits)"
        return desc

class CommandError(Error):
    """@brief Raised when a command encounters an error."""
    pass
