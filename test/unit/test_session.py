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

import pytest
import threading

from stubcodec.core.exceptions import (MalformedDump, MalformedEncoding, TargetSupportError)
from stubcodec.core.session import Session
from stubcodec.target.builtin.target_cisco2600 import Cisco2600

def run_in_parallel(function, args_list):
    """! @brief Create and run a thread in parallel for each element in args_list

    Wait until all threads finish executing. Throw an exception if an exception
    occurred on any of the threads.
    """
    def _thread_helper(idx, func, args):
        func(*args)
        result_list[idx] = True

    result_list = [False] * len(args_list)
    thread_list = []
    for idx, args in enumerate(args_list):
        thread = threading.Thread(target=_thread_helper,
                                  args=(idx, function, args))
        thread_list.append(thread)

    for thread in thread_list:
        thread.start()
    for thread in thread_list:
        thread.join()
    if not all(result_list):
        raise RuntimeError("Running in thread failed")

class TestSessionOptions:
    def test_defaults(self):
        session = Session()
        assert session.options.get('target') == "cisco2600"
        assert session.options['rle'] is True
        assert session.log_tracebacks is False
        assert not session.options.is_set('rle')

    def test_options_and_kwargs(self):
        session = Session(options={'rle': False}, log_tracebacks=True)
        assert session.options['rle'] is False
        assert session.log_tracebacks is True
        assert session.options.is_set('rle')

    def test_unknown_option(self):
        with pytest.raises(ValueError):
            Session(options={'frequency': 1000})

    def test_wrong_type(self):
        with pytest.raises(ValueError):
            Session(options={'rle': "yes"})

    def test_unknown_option_get(self):
        with pytest.raises(KeyError):
            Session().options.get('frequency')

    def test_iter(self):
        assert set(Session().options) == {'target', 'rle', 'log_tracebacks'}

class TestSessionTarget:
    def test_default_target(self):
        assert isinstance(Session().target, Cisco2600)

    def test_target_override(self):
        session = Session(options={'target': "unknown"}, target_override="Cisco2600")
        assert isinstance(session.target, Cisco2600)

    def test_unknown_target(self):
        with pytest.raises(TargetSupportError):
            Session(target_override="z80")

    def test_sessions_own_profiles(self):
        assert Session().target is not Session().target

class TestReadRegisters:
    def test_compressed_dump(self):
        session = Session()
        values = session.read_registers("0*ff0*3f")
        assert len(values) == 110
        assert values[33].value == "00000000"
        assert session.instruction_pointer(values) == 0

    def test_compressed_pc(self, cisco_dump):
        session = Session()
        dump = cisco_dump(pc=0x80008000).replace("0" * 8, "0*07")
        assert "*" in dump
        assert session.instruction_pointer(session.read_registers(dump)) == 0x80008000

    def test_uncompressed(self, cisco_dump):
        session = Session(rle=False)
        values = session.read_registers(cisco_dump(gprs=range(32)))
        assert values[3].name == "r2" and values[3].value == "00000002"

    def test_rle_disabled_keeps_marker(self):
        session = Session(rle=False)
        with pytest.raises(MalformedDump):
            session.read_registers("0*ff0*3f")

    def test_malformed_encoding(self):
        with pytest.raises(MalformedEncoding):
            Session().read_registers("*ff")

    def test_malformed_encoding_offset(self):
        with pytest.raises(MalformedEncoding) as excinfo:
            Session().read_registers("0*ff0*00")
        assert excinfo.value.offset == 5
        assert str(excinfo.value) == "zero run count (at offset 5)"

    def test_short_dump(self):
        with pytest.raises(MalformedDump):
            Session().read_registers("0*ff0*3e")

    def test_instruction_pointer_missing(self):
        assert Session.instruction_pointer([]) is None

    def test_instruction_pointer_not_hex(self, layout, cisco_dump):
        dump = cisco_dump()
        offset = layout.offset_of("pc") * 2
        dump = dump[:offset] + "xxxxxxxx" + dump[offset + 8:]
        values = Session(rle=False).read_registers(dump)
        assert values[33].value == "xxxxxxxx"
        with pytest.raises(MalformedDump):
            Session.instruction_pointer(values)

class TestConcurrentSessions:
    TEST_REPEAT = 20

    def test_parallel_decoding(self, cisco_dump):
        def _test(pc):
            session = Session()
            dump = cisco_dump(pc=pc, cr=pc & 0xf)
            for i in range(self.TEST_REPEAT):
                values = session.read_registers(dump)
                assert session.instruction_pointer(values) == pc
                assert values[40].value == f"{pc & 0xf:x}"

        run_in_parallel(_test, [(0x1000 + n,) for n in range(8)])

    def test_parallel_shared_profile(self, profile, cisco_dump):
        def _test(sp):
            dump = cisco_dump(gprs=[0, sp])
            for i in range(self.TEST_REPEAT):
                values = profile.parse_registers(dump)
                assert int(values[2]) == sp

        run_in_parallel(_test, [(0x2000 * n,) for n in range(8)])
