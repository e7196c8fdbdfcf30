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

r"""State classes and their rotations.

A state is one stage of the cycle that a glyph goes through: the base
glyphs are one state, the first stylistic set is the next, and so on.
Each state has a glyph class named ``@transformationN``.

A rotation is a class named ``@stateN`` that concatenates all the state
classes, starting with state ``N`` and wrapping around. Rotations all
have the same length, so substituting ``@stateN`` by ``@stateN+1`` maps
each glyph in any state to the corresponding glyph in the following
state.
"""


from __future__ import annotations

import sys
from typing import Final
from typing import TYPE_CHECKING

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from utils import STATE_CLASS_PREFIX
from utils import TRANSFORMATION_CLASS_PREFIX


if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Sequence


class StateClass:
    """A named glyph class.

    The same type is used for states, for rotations of states, and for
    partitions. The members of a state or a partition are glyph names;
    the members of a rotation are the names of states.

    Attributes:
        name: The name of the class, without the ``@``.
        members: The members of the class.
    """

    def __init__(self, name: str, members: Iterable[str]) -> None:
        self.name: Final = name
        self.members: Final[tuple[str, ...]] = tuple(members)

    @override
    def __repr__(self) -> str:
        return f'StateClass({self.name!r}, {list(self.members)!r})'

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, StateClass) and self.name == other.name and self.members == other.members

    @override
    def __hash__(self) -> int:
        return hash((self.name, self.members))


def define_state_classes(transitions: Iterable[Iterable[str]]) -> Sequence[StateClass]:
    """Returns the state classes for a catalogue.

    No validation is done. The caller is responsible for making the
    classes disjoint and of equal length.

    Args:
        transitions: The glyph lists of the states, in cycle order.
    """
    return [StateClass(f'{TRANSFORMATION_CLASS_PREFIX}{i}', glyphs) for i, glyphs in enumerate(transitions)]


def define_rotations(states: Sequence[StateClass]) -> Sequence[StateClass]:
    """Returns the rotations of some state classes.

    The rotation at index ``i`` lists the state names rotated left by
    ``i`` positions.

    Args:
        states: The state classes.
    """
    names = [state.name for state in states]
    return [StateClass(f'{STATE_CLASS_PREFIX}{i}', [*names[i:], *names[:i]]) for i in range(len(names))]


def successors(rotations: Sequence[StateClass]) -> Sequence[tuple[StateClass, StateClass]]:
    """Pairs each rotation with the one after it.

    The last rotation is paired with the first, closing the cycle.

    Args:
        rotations: The rotations, as returned by `define_rotations`.
    """
    return [(rotation, rotations[(i + 1) % len(rotations)]) for i, rotation in enumerate(rotations)]
