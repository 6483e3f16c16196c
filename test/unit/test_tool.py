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

import io
import pytest

from stubcodec.__main__ import main

class TestTargetCommands:
    def test_list(self, capsys):
        assert main(['target', 'list']) == 0
        assert capsys.readouterr().out.startswith("cisco2600")

    def test_info(self, capsys):
        assert main(['target', 'info', '-t', 'cisco2600']) == 0
        out = capsys.readouterr().out
        assert "Address size:      32" in out
        assert "IP index:          33" in out
        assert "Dump size:         160 bytes" in out
        assert "xer_bytecount" in out and "xer[29:24]" in out

    def test_info_no_header(self, capsys):
        assert main(['target', 'info', '-H']) == 0
        assert "Index" not in capsys.readouterr().out

    def test_info_unknown_target(self):
        assert main(['target', 'info', '-t', 'z80']) == 1

    def test_target_without_subcommand(self, capsys):
        assert main(['target']) == 1

class TestDecodeCommand:
    def test_decode(self, capsys):
        assert main(['decode', '0*ff0*3f']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 110
        assert lines[-1].startswith("fpscr_RN") and lines[-1].endswith("= 0")

    def test_decode_ip(self, capsys, word_dump):
        assert main(['decode', '--no-rle', '--ip', word_dump(range(40))]) == 0
        assert capsys.readouterr().out == "0x00000021\n"

    def test_decode_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr('sys.stdin', io.StringIO("0*ff0*3f\n\n0*ff0*3f\n"))
        assert main(['decode', '--ip']) == 0
        assert capsys.readouterr().out == "0x00000000\n0x00000000\n"

    def test_decode_malformed(self, capsys):
        assert main(['decode', '--ip', '*00', '0*ff0*3f']) == 1
        assert capsys.readouterr().out == "0x00000000\n"

    def test_decode_invalid_ip_continues(self, capsys, word_dump):
        words = word_dump(range(40))
        bad = words[:33 * 8] + "xxxxxxxx" + words[34 * 8:]
        assert main(['decode', '--no-rle', '--ip', bad, words]) == 1
        assert capsys.readouterr().out == "0x00000021\n"

class TestTool:
    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(['--version'])
