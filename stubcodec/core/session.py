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
from typing import (Any, Dict, Iterator, List, Mapping, Optional)

from . import exceptions
from .options import OPTIONS_INFO
from .registers import RegisterValue
from ..target import TARGET
from ..target.profile import TargetProfile
from ..utility.mask import is_hex_digits

LOG = logging.getLogger(__name__)

class SessionOptions:
    """@brief Option values for a session.

    Only options declared in OPTIONS_INFO are accepted. Options that are not set return their
    declared default.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = {}
        for name, value in (options or {}).items():
            self[name] = value

    def get(self, name: str) -> Any:
        """@brief Return the value of an option, or its default if not set.
        @exception KeyError Unknown option name.
        """
        if name in self._values:
            return self._values[name]
        return OPTIONS_INFO[name].default

    def is_set(self, name: str) -> bool:
        return name in self._values

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        try:
            info = OPTIONS_INFO[name]
        except KeyError:
            raise ValueError(f"unknown option '{name}'") from None
        if not isinstance(value, info.type):
            raise ValueError(f"option '{name}' must be of type {info.type.__name__}, "
                             f"not {type(value).__name__}")
        self._values[name] = value

    def __contains__(self, name: object) -> bool:
        return name in OPTIONS_INFO

    def __iter__(self) -> Iterator[str]:
        return iter(OPTIONS_INFO)

class Session:
    """@brief Decoding session for one debug stub connection.

    The session selects a target profile from its options and runs the decoding flow for replies
    received from the stub: run-length decoding followed by register dump parsing. Each session
    creates its own profile instance.
    """

    def __init__(
                self,
                options: Optional[Mapping[str, Any]] = None,
                target_override: Optional[str] = None,
                **kwargs: Any
            ) -> None:
        """@brief Constructor.
        @param self
        @param options Optional mapping of option names to values.
        @param target_override Profile name that takes precedence over the 'target' option.
        @param kwargs Additional options, overriding those passed in _options_.
        @exception ValueError An option is unknown or has the wrong type.
        @exception TargetSupportError The profile name is not recognized.
        """
        self._options = SessionOptions(options)
        for name, value in kwargs.items():
            self._options[name] = value
        if target_override is not None:
            self._options['target'] = target_override

        target_type = self._options.get('target').lower()
        try:
            self._target = TARGET[target_type]()
        except KeyError:
            raise exceptions.TargetSupportError(
                "Target type '%s' not recognized. Available target types: %s"
                % (target_type, ", ".join(sorted(TARGET)))) from None
        LOG.debug("session using target profile %s", self._target.name)

    @property
    def options(self) -> SessionOptions:
        return self._options

    @property
    def target(self) -> TargetProfile:
        return self._target

    @property
    def log_tracebacks(self) -> bool:
        return self._options.get('log_tracebacks')

    def read_registers(self, reply: str) -> List[RegisterValue]:
        """@brief Decode a register dump reply.

        @param self
        @param reply Reply payload from the stub, without packet framing.
        @return List of RegisterValue in the order of the profile's register catalog.
        @exception MalformedEncoding The reply's run-length encoding is invalid.
        @exception MalformedDump The expanded reply doesn't match the register layout.
        """
        if self._options.get('rle'):
            flat = self._target.decode_run_length(reply)
        else:
            flat = reply
        return self._target.parse_registers(flat)

    @staticmethod
    def instruction_pointer(values: List[RegisterValue]) -> Optional[int]:
        """@brief Integer value of the instruction pointer in a list of register values, or None.
        @exception MalformedDump The instruction pointer's value is not hexadecimal.
        """
        for value in values:
            if value.is_instruction_pointer:
                if not is_hex_digits(value.value):
                    raise exceptions.MalformedDump(
                            f"instruction pointer {value.name} has invalid value '{value.value}'")
                return int(value)
        return None
