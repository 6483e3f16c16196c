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

from ...utility.register import RegisterDefinition

# Fixed-Point Exception Register, field positions as reported by the Cisco stub.
class XER(RegisterDefinition):
    SO          = 0
    OV          = 1
    CA          = 2
    BYTECOUNT   = (29, 24)

# Condition Register, eight 4-bit fields.
class CR(RegisterDefinition):
    CR0         = (3, 0)
    CR1         = (7, 4)
    CR2         = (11, 8)
    CR3         = (15, 12)
    CR4         = (19, 16)
    CR5         = (23, 20)
    CR6         = (27, 24)
    CR7         = (31, 28)

    CR0_LT      = 0
    CR0_GT      = 1
    CR0_EQ      = 2
    CR0_SO      = 3
    CR1_LT      = 4
    CR1_GT      = 5
    CR1_EQ      = 6
    CR1_SO      = 7
    CR2_LT      = 8
    CR2_GT      = 9
    CR2_EQ      = 10
    CR2_SO      = 11
    CR3_LT      = 12
    CR3_GT      = 13
    CR3_EQ      = 14
    CR3_SO      = 15
    CR4_LT      = 16
    CR4_GT      = 17
    CR4_EQ      = 18
    CR4_SO      = 19
    CR5_LT      = 20
    CR5_GT      = 21
    CR5_EQ      = 22
    CR5_SO      = 23
    CR6_LT      = 24
    CR6_GT      = 25
    CR6_EQ      = 26
    CR6_SO      = 27
    CR7_LT      = 28
    CR7_GT      = 29
    CR7_EQ      = 30
    CR7_SO      = 31

## Flag names of each CR field, from bit 0 of the field upwards.
CR_FIELD_FLAGS = ('LT', 'GT', 'EQ', 'SO')

# Floating-Point Status and Control Register
class FPSCR(RegisterDefinition):
    FX          = 0
    FEX         = 1
    VX          = 2
    QX          = 3
    UX          = 4
    ZX          = 5
    XX          = 6
    VXNAN       = 7
    VXISI       = 8
    VXIDI       = 9
    VXZDZ       = 10
    VXIMZ       = 11
    VXVC        = 12
    FR          = 13
    FI          = 14
    FPRF        = (19, 15)
    VXSOFT      = 21
    VXSQRT      = 22
    VXCVI       = 23
    VE          = 24
    OE          = 25
    UE          = 26
    ZE          = 27
    XE          = 28
    NI          = 29
    RN          = (31, 30)
