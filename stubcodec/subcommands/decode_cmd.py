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
import sys
from typing import List

from .base import SubcommandBase
from ..commands.output import format_register_values
from ..core import exceptions

LOG = logging.getLogger(__name__)

class DecodeSubcommand(SubcommandBase):
    """! @brief `stubcodec decode` subcommand."""

    NAMES = ['decode']
    HELP = "Decode register dump replies."
    DEFAULT_LOG_LEVEL = logging.WARNING

    @classmethod
    def get_args(cls) -> List[argparse.ArgumentParser]:
        """! @brief Add this subcommand to the subparsers object."""
        parser = argparse.ArgumentParser(description=cls.HELP, add_help=False)

        group = parser.add_argument_group("decode options")
        group.add_argument('--no-rle', dest='rle', action='store_false',
            help="Replies are not run-length encoded.")
        group.add_argument('--ip', action='store_true',
            help="Only print the instruction pointer.")
        group.add_argument("replies", nargs='*', metavar="REPLY",
            help="Reply payloads. Read one per line from stdin if not given.")

        return [cls.CommonOptions.COMMON, parser]

    def invoke(self) -> int:
        """! @brief Handle 'decode' subcommand."""
        session = self._create_session()
        session.options['rle'] = self._args.rle

        replies = self._args.replies or [line.strip() for line in sys.stdin if line.strip()]
        status = 0
        for reply in replies:
            try:
                values = session.read_registers(reply)
                if self._args.ip:
                    ip = session.instruction_pointer(values)
                    lines = ["-" if ip is None else f"{ip:#010x}"]
                else:
                    lines = list(format_register_values(values))
            except exceptions.ProtocolError as err:
                LOG.error("Malformed reply: %s", err, exc_info=session.log_tracebacks)
                status = 1
                continue

            for line in lines:
                print(line)
        return status
