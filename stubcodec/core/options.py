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

from typing import (Any, Dict, NamedTuple, Type)

class OptionInfo(NamedTuple):
    name: str
    type: Type
    default: Any
    help: str

## @brief Definitions of the builtin options.
BUILTIN_OPTIONS = [
    OptionInfo('target', str, "cisco2600",
        "Name of the target profile used to describe and decode register dumps."),
    OptionInfo('rle', bool, True,
        "Whether replies are run-length decoded before they are parsed."),
    OptionInfo('log_tracebacks', bool, False,
        "Print tracebacks for errors reported by interactive commands."),
    ]

## @brief Dictionary of all option names to OptionInfo.
OPTIONS_INFO: Dict[str, OptionInfo] = {o.name: o for o in BUILTIN_OPTIONS}
