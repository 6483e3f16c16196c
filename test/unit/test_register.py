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

from stubcodec.utility.register import (
    Bitfield,
    RegisterDefinition,
)
from stubcodec.target.builtin.ppc_registers import (CR, CR_FIELD_FLAGS, FPSCR, XER)

# MPC860 SIU interrupt level register, upper half only.
class SIEL(RegisterDefinition, name="siel_hi", width=16):
    ED0         = 15
    WM0         = 14
    ED7         = (1,)

class TestBitfield:
    def test_single_bit(self):
        bf = Bitfield(5)
        assert bf.msb == bf.lsb == bf.shift == 5
        assert bf.width == 1
        assert bf.mask == 0x20
        assert bf.register_width == 32

    def test_range(self):
        bf = Bitfield(19, 15, name="FPRF")
        assert bf.width == 5
        assert bf.mask == 0x000f8000
        assert bf.name == "FPRF"
        assert repr(bf) == "<Bitfield FPRF 19:15>"

    def test_unnamed(self):
        assert Bitfield(3, 0).name == "(unnamed)"

    def test_get(self):
        bf = Bitfield(7, 4)
        assert bf.get(0x000000a5) == 0xa
        assert bf.get(0xffffff0f) == 0

    def test_equality(self):
        assert Bitfield(3, 0) == Bitfield(3, 0, name="CR0")
        assert Bitfield(3, 0) != Bitfield(3)
        assert Bitfield(0) != 1

    def test_msb_out_of_range(self):
        with pytest.raises(AssertionError):
            Bitfield(32)
        with pytest.raises(AssertionError):
            Bitfield(16, register_width=16)

class TestRegisterDefinition:
    def test_single_bit_fields(self):
        assert XER.SO.mask == 0x1
        assert XER.SO.width == 1
        assert XER.CA.lsb == 2 and XER.CA.msb == 2

    def test_range_field(self):
        assert XER.BYTECOUNT.mask == 0x3f000000
        assert XER.BYTECOUNT.shift == 24
        assert XER.BYTECOUNT.width == 6

    def test_one_element_sequence(self):
        assert SIEL.ED7.msb == SIEL.ED7.lsb == 1

    def test_register_width(self):
        assert SIEL.WM0._register_width == 16
        assert SIEL.ED0.mask == 0x8000

    def test_names(self):
        assert XER.name == "xer"
        assert FPSCR.name == "fpscr"
        assert SIEL.name == "siel_hi"

    def test_width(self):
        assert SIEL.width == 16
        assert XER.width == 32

    def test_fields_sorted(self):
        assert [f.name for f in SIEL.fields] == ['ED7', 'WM0', 'ED0']
        assert [f.name for f in XER.fields] == ['SO', 'OV', 'CA', 'BYTECOUNT']

    def test_reserved_mask(self):
        assert XER.reserved_mask == 0xc0fffff8
        assert SIEL.reserved_mask == 0x3ffd

    def test_other_attributes_kept(self):
        class MSR(RegisterDefinition):
            EE          = 15
            DESCRIPTION = "machine state"
        assert MSR.DESCRIPTION == "machine state"
        assert [f.name for f in MSR.fields] == ['EE']

    def test_invalid_width(self):
        with pytest.raises(TypeError):
            class BAD(RegisterDefinition, width=12):
                pass

    def test_invalid_sequence(self):
        with pytest.raises(TypeError):
            class BAD(RegisterDefinition):
                FOO = (3, 2, 1)

    def test_invalid_sequence_element(self):
        with pytest.raises(TypeError):
            class BAD(RegisterDefinition):
                FOO = (3, "0")

    def test_instance_fields(self):
        r = XER(0x03000005)
        assert r.SO == 1
        assert r.OV == 0
        assert r.CA == 1
        assert r.BYTECOUNT == 3

    def test_from_hex(self):
        assert FPSCR.from_hex("c0000000").RN == 3
        assert CR.from_hex("0000000F").CR0 == 0xf

    @pytest.mark.parametrize("text", ["", "xxxxxxxx", "0x12", "12 4"])
    def test_from_hex_invalid(self, text):
        with pytest.raises(ValueError):
            CR.from_hex(text)

    def test_iter_fields(self):
        r = XER(0x01000002)
        assert [(f.name, v) for f, v in r.iter_fields()] == [
            ('SO', 0), ('OV', 1), ('CA', 0), ('BYTECOUNT', 1)]

    def test_index_and_repr(self):
        r = SIEL(0x8002)
        assert int(r) == 0x8002
        assert hex(r) == "0x8002"
        assert repr(r) == "<siel_hi =8002>"
        assert repr(XER(0x20000000)) == "<xer =20000000>"

class TestPowerPCRegisters:
    def test_cr_fields_cover_register(self):
        assert CR.reserved_mask == 0
        for n in range(8):
            group = getattr(CR, f"CR{n}")
            assert group.shift == 4 * n and group.width == 4
            for bit, flag in enumerate(CR_FIELD_FLAGS):
                assert getattr(CR, f"CR{n}_{flag}").shift == 4 * n + bit

    def test_cr_group_and_flags_agree(self):
        r = CR(0x80000008)
        assert r.CR0 == 8 and r.CR0_SO == 1 and r.CR0_LT == 0
        assert r.CR7 == 8 and r.CR7_SO == 1
        assert r.CR3 == 0

    def test_fpscr_multibit_fields(self):
        assert FPSCR.FPRF.shift == 15 and FPSCR.FPRF.width == 5
        assert FPSCR.RN.shift == 30 and FPSCR.RN.width == 2
        assert len(FPSCR.fields) == 26

    def test_fpscr_reserved_bit(self):
        assert FPSCR.reserved_mask == 0x00100000
