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

import argparse
import logging
from typing import List

from .base import SubcommandBase
from ..target import TARGET

class TargetInfoSubcommand(SubcommandBase):
    """! @brief `stubcodec target info` subcommand."""

    NAMES = ['info']
    HELP = "Describe a target profile and its register catalog."
    DEFAULT_LOG_LEVEL = logging.WARNING

    @classmethod
    def get_args(cls) -> List[argparse.ArgumentParser]:
        """! @brief Add this subcommand to the subparsers object."""
        parser = argparse.ArgumentParser(description=cls.HELP, add_help=False)

        group = parser.add_argument_group("target options")
        group.add_argument('-H', '--no-header', action='store_true',
            help="Don't print table headers.")

        return [cls.CommonOptions.COMMON, parser]

    def invoke(self) -> int:
        """! @brief Handle 'target info' subcommand."""
        session = self._create_session()
        target = session.target
        layout = target.register_layout
        options = target.debugger_options

        print("Target:           ", target.name)
        print("Description:      ", target.DESCRIPTION)
        print("Address size:     ", target.address_size)
        print("Greet message:    ", target.greet_message)
        print("IP index:         ", target.instruction_pointer_index)
        print("Dump size:        ", f"{layout.wire_size} bytes")
        print("Options:          ", ", ".join(f"{k}={v}" for k, v in options._asdict().items()))
        print("Registers:")

        # Print register catalog.
        if not self._args.no_header:
            print(f"  {'Index':>5}  {'Name':<14}{'Size':>4}  {'Offset':>6}  Source")
        for index, desc in enumerate(layout.catalog()):
            composite = layout.composite(desc.name)
            if composite is not None:
                offset = "-"
                source = f"{composite.parent}[{composite.field.msb}:{composite.field.lsb}]"
            else:
                offset = f"{layout.offset_of(desc.name):#x}"
                source = "dump"
            print(f"  {index:>5}  {desc.name:<14}{desc.size:>4}  {offset:>6}  {source}")

        return 0

class TargetListSubcommand(SubcommandBase):
    """! @brief `stubcodec target list` subcommand."""

    NAMES = ['list']
    HELP = "List available target profiles."
    DEFAULT_LOG_LEVEL = logging.WARNING

    @classmethod
    def get_args(cls) -> List[argparse.ArgumentParser]:
        """! @brief Add this subcommand to the subparsers object."""
        parser = argparse.ArgumentParser(description=cls.HELP, add_help=False)
        return [cls.CommonOptions.LOGGING, parser]

    def invoke(self) -> int:
        """! @brief Handle 'target list' subcommand."""
        for name in sorted(TARGET):
            print(f"{name:<16}{TARGET[name].DESCRIPTION}")
        return 0

class TargetSubcommand(SubcommandBase):
    """! @brief `stubcodec target` subcommand."""

    NAMES = ['target']
    HELP = "Target related commands."
    SUBCOMMANDS = [
        TargetInfoSubcommand,
        TargetListSubcommand,
        ]

    @classmethod
    def get_args(cls) -> List[argparse.ArgumentParser]:
        """! @brief Add this subcommand to the subparsers object."""
        parser = argparse.ArgumentParser(description=cls.HELP, add_help=False)
        cls.add_subcommands(parser)

        return [parser]

    def invoke(self) -> int:
        """! @brief Handle 'target' without a nested subcommand."""
        print("Use 'stubcodec target info' or 'stubcodec target list'.")
        return 1
