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
from typing import (List, Optional)

from . import __version__
from .core import exceptions
from .subcommands.base import SubcommandBase
from .subcommands.decode_cmd import DecodeSubcommand
from .subcommands.repl_cmd import ReplSubcommand
from .subcommands.target_cmd import TargetSubcommand

LOG = logging.getLogger("stubcodec.tool")

## Default log format.
LOG_FORMAT = "%(relativeCreated)07d %(levelname)s %(name)s: %(message)s"

class StubcodecTool(SubcommandBase):
    """! @brief Main class for the stubcodec command line tool."""

    HELP = "Register dump decoder for remote debug stubs."
    SUBCOMMANDS = [
        DecodeSubcommand,
        ReplSubcommand,
        TargetSubcommand,
        ]

    def __init__(self) -> None:
        super().__init__(argparse.Namespace())
        self._parser = self.build_parser()

    @classmethod
    def build_parser(cls) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='stubcodec', description=cls.HELP)
        parser.add_argument('-V', '--version', action='version', version=__version__)
        cls.add_subcommands(parser)
        return parser

    def run(self, args: Optional[List[str]] = None) -> int:
        """! @brief Parse arguments and invoke the selected subcommand."""
        self._args = self._parser.parse_args(args)

        cmd_class = getattr(self._args, 'cmd', None)
        if cmd_class is None:
            self._parser.print_help()
            return 1

        logging.basicConfig(format=LOG_FORMAT,
                level=cmd_class.compute_log_level(self._args))

        try:
            return cmd_class(self._args).invoke()
        except KeyboardInterrupt:
            return 0
        except exceptions.Error as e:
            LOG.critical(e, exc_info=bool(getattr(self._args, 'log_tracebacks', False)))
        except Exception as e:
            LOG.critical("uncaught exception: %s", e, exc_info=True)
        return 1

def main(args: Optional[List[str]] = None) -> int:
    return StubcodecTool().run(args)

if __name__ == '__main__':
    sys.exit(main())
