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
from ..commands.repl import StubcodecRepl

class ReplSubcommand(SubcommandBase):
    """! @brief `stubcodec repl` subcommand."""

    NAMES = ['repl']
    HELP = "Decode replies interactively."
    DEFAULT_LOG_LEVEL = logging.WARNING

    @classmethod
    def get_args(cls) -> List[argparse.ArgumentParser]:
        """! @brief Add this subcommand to the subparsers object."""
        parser = argparse.ArgumentParser(description=cls.HELP, add_help=False)
        return [cls.CommonOptions.COMMON, parser]

    def invoke(self) -> int:
        """! @brief Handle 'repl' subcommand."""
        session = self._create_session()
        print(f"Decoding replies for target {session.target.name}. Enter 'exit' or Ctrl-D to quit.")
        StubcodecRepl(session).run()
        return 0
