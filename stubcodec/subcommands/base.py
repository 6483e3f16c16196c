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
from typing import (List, Optional, Sequence, Type)

from ..core.session import Session

LOG = logging.getLogger(__name__)

class SubcommandBase:
    """! @brief Base class for stubcodec command line subcommands."""

    ## List of subcommand names. The first name is the primary name.
    NAMES: List[str] = []

    ## Help string for the subcommand.
    HELP: str = ""

    ## Log level used unless changed by -v or -q options.
    DEFAULT_LOG_LEVEL = logging.INFO

    ## Nested subcommand classes.
    SUBCOMMANDS: Sequence[Type["SubcommandBase"]] = []

    class CommonOptions:
        """! @brief Namespace for argument parsers shared by subcommands."""

        LOGGING = argparse.ArgumentParser(description='logging', add_help=False)
        LOGGING_GROUP = LOGGING.add_argument_group("logging")
        LOGGING_GROUP.add_argument('-v', '--verbose', action='count', default=0,
            help="Increase logging level. Can be specified multiple times.")
        LOGGING_GROUP.add_argument('-q', '--quiet', action='count', default=0,
            help="Decrease logging level. Can be specified multiple times.")

        COMMON = argparse.ArgumentParser(description='common', parents=[LOGGING], add_help=False)
        COMMON_GROUP = COMMON.add_argument_group("common options")
        COMMON_GROUP.add_argument('-t', '--target', dest='target_override', metavar="TARGET",
            help="Name of the target profile.")
        COMMON_GROUP.add_argument('--tracebacks', dest='log_tracebacks', action='store_true', default=None,
            help="Print tracebacks for errors.")

    @classmethod
    def get_args(cls) -> List[argparse.ArgumentParser]:
        """! @brief Return the argument parsers for this subcommand."""
        raise NotImplementedError()

    @classmethod
    def add_subcommands(cls, parser: argparse.ArgumentParser) -> None:
        """! @brief Add nested subcommands to a parser."""
        subparsers = parser.add_subparsers(title="subcommands", metavar="", dest='subcommand')
        for subcmd_class in cls.SUBCOMMANDS:
            subparsers.add_parser(subcmd_class.NAMES[0], aliases=subcmd_class.NAMES[1:],
                    help=subcmd_class.HELP, parents=subcmd_class.get_args()) \
                .set_defaults(cmd=subcmd_class)

    def __init__(self, args: argparse.Namespace) -> None:
        self._args = args

    def invoke(self) -> int:
        """! @brief Run the subcommand.
        @return Process exit status.
        """
        raise NotImplementedError()

    def _create_session(self) -> Session:
        """! @brief Create a session from the common options."""
        options = {}
        if getattr(self._args, 'log_tracebacks', None) is not None:
            options['log_tracebacks'] = self._args.log_tracebacks
        return Session(options=options, target_override=getattr(self._args, 'target_override', None))

    @classmethod
    def compute_log_level(cls, args: argparse.Namespace, default: Optional[int] = None) -> int:
        """! @brief Log level from the default and the -v/-q counts."""
        level = cls.DEFAULT_LOG_LEVEL if default is None else default
        delta = (getattr(args, 'quiet', 0) - getattr(args, 'verbose', 0)) * 10
        return min(max(level + delta, logging.DEBUG), logging.CRITICAL)
