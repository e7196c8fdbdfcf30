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

"""The built-in glyph catalogue.

The catalogue is a list of states. The first state is the base glyphs;
each following state is one stylistic set, named with the usual
``.ssNN`` suffix. The states are disjoint and parallel: the glyph at a
given index is a variant of the same character in every state.
"""


from collections.abc import Sequence
import string
from typing import Final

import fontTools.agl

from charsets import Charset


#: The glyph names of the letters, in alphabetical order.
LETTERS: Final[Sequence[str]] = [*string.ascii_lowercase]


#: The glyph names of the digits, in numerical order.
DIGITS: Final[Sequence[str]] = [fontTools.agl.UV2AGL[ord(digit)] for digit in string.digits]


#: The highest stylistic set number that OpenType defines.
MAX_STYLISTIC_SETS: Final[int] = 20


def stylistic_set_suffix(index: int) -> str:
    """Returns the glyph name suffix of a stylistic set.

    Args:
        index: The 1-based number of the stylistic set.
    """
    return f'.ss{index:02}'


def get_base_glyphs(charset: Charset) -> Sequence[str]:
    """Returns the base glyph names in a character set.
    """
    match charset:
        case Charset.LETTERS:
            return LETTERS
        case Charset.DIGITS:
            return DIGITS
        case Charset.STANDARD:
            return [*LETTERS, *DIGITS]


def initialize_transitions(charset: Charset, stylistic_sets: int) -> Sequence[Sequence[str]]:
    """Returns the states of the built-in catalogue.

    Args:
        charset: Which base glyphs to include.
        stylistic_sets: The number of stylistic sets following the base
            glyphs.

    Raises:
        ValueError: If `stylistic_sets` is not between 1 and
            `MAX_STYLISTIC_SETS`.
    """
    if not 1 <= stylistic_sets <= MAX_STYLISTIC_SETS:
        raise ValueError(f'The number of stylistic sets must be between 1 and {MAX_STYLISTIC_SETS}: {stylistic_sets}')
    base = get_base_glyphs(charset)
    transitions = [
        base,
        *([f'{glyph}{stylistic_set_suffix(i)}' for glyph in base] for i in range(1, stylistic_sets + 1)),
    ]
    if __debug__:
        all_glyphs = [glyph for glyphs in transitions for glyph in glyphs]
        assert len(all_glyphs) == len(set(all_glyphs)), 'The states of the catalogue must be disjoint'
    return transitions
