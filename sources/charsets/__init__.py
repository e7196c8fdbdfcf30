# Copyright 2026 The pseudorandom-calt Authors
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

"""Character set enum.

The built-in catalogue can cycle different subsets of the base glyphs.
`Charset` is an enum representing the available character sets.
"""


import enum


@enum.unique
class Charset(enum.StrEnum):
    """A set of base glyphs to cycle through their stylistic sets.
    """

    #: The basic Latin lowercase letters.
    LETTERS = enum.auto()

    #: The ASCII digits, with their standard glyph names.
    DIGITS = enum.auto()

    #: The union of `LETTERS` and `DIGITS`.
    STANDARD = enum.auto()
