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
import os
from pathlib import Path
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style
from prompt_toolkit.history import FileHistory

from ..core import exceptions
from ..core.session import Session
from .output import format_register_values

LOG = logging.getLogger(__name__)

class ToolExitException(Exception):
    """@brief Special exception indicating the tool should exit.

    This exception is only raised by the `exit` command.
    """
    pass


class StubcodecReplBase:
    """@brief Base Read-Eval-Print-Loop class for decoding stub replies.

    Each input line is a reply payload as received from the stub. It is decoded with the session's
    target profile and the register values are printed. The lines `exit` and `quit` end the loop.
    """

    STUBCODEC_HISTORY_ENV_VAR = 'STUBCODEC_HISTORY'
    DEFAULT_HISTORY_FILE = ".stubcodec_history"

    EXIT_COMMANDS = ('exit', 'quit')

    def __init__(self, session: Session) -> None:
        self.session = session

        # Get path to history file.
        self._history_path = Path(os.environ.get(self.STUBCODEC_HISTORY_ENV_VAR,
               Path("~") / self.DEFAULT_HISTORY_FILE)).expanduser()

    def run(self) -> None:
        """@brief Runs the REPL loop until EOF is encountered."""
        raise NotImplementedError()

    def run_one_command(self, line: str) -> None:
        """@brief Decode a single reply line and handle exceptions."""
        try:
            line = line.strip()
            if line in self.EXIT_COMMANDS:
                raise ToolExitException()
            if line:
                target = self.session.target
                if target.is_breakpoint_message(line):
                    print("Breakpoint message")
                    return
                for text in format_register_values(self.session.read_registers(line)):
                    print(text)
        except KeyboardInterrupt:
            print()
        except exceptions.ProtocolError as e:
            print("Malformed reply:", e)
            if self.session.log_tracebacks:
                traceback.print_exc()
        except ToolExitException:
            # Catch and reraise this exception so it isn't caught by the catchall below.
            raise
        except Exception as e:
            # Catch most other exceptions so they don't cause the REPL to exit.
            print("Error:", e)
            if self.session.log_tracebacks:
                traceback.print_exc()


class PromptToolkitRepl(StubcodecReplBase):
    """@brief REPL using the prompt_toolkit package."""

    PROMPT = FormattedText([
            ('class:a', "stubcodec"),
            ('class:b', "> ")
            ])

    PROMPT_STYLE = Style.from_dict({
            'a': '#2080e0',
            'b': '#44ff00',
            })

    def __init__(self, session: Session) -> None:
        super().__init__(session)

        # Create prompt session.
        history = FileHistory(str(self._history_path))
        self._prompt_session = PromptSession(
                message=self.PROMPT,
                style=self.PROMPT_STYLE,
                history=history)

    def run(self) -> None:
        """@brief Runs the REPL loop until EOF is encountered."""
        try:
            while True:
                try:
                    line = self._prompt_session.prompt()
                    self.run_one_command(line)
                except KeyboardInterrupt:
                    # Ignore Ctrl-C and continue the loop.
                    pass
        except (EOFError, ToolExitException):
            # Just exit the REPL on Ctrl-D or the exit command.
            pass


StubcodecRepl = PromptToolkitRepl
