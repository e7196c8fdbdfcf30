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

import pytest

import catalogue
from charsets import Charset
from states import StateClass
from states import define_rotations
from states import define_state_classes
from states import successors


TRANSITIONS = [['a', 'b'], ['a.ss01', 'b.ss01'], ['a.ss02', 'b.ss02']]


class TestStateClasses:
    def test_names_and_order(self) -> None:
        classes = define_state_classes(TRANSITIONS)
        assert classes == [
            StateClass('transformation0', ['a', 'b']),
            StateClass('transformation1', ['a.ss01', 'b.ss01']),
            StateClass('transformation2', ['a.ss02', 'b.ss02']),
        ]

    def test_no_deduplication(self) -> None:
        [cls] = define_state_classes([['a', 'a']])
        assert cls.members == ('a', 'a')


class TestRotations:
    def test_rotated_left(self) -> None:
        rotations = define_rotations(define_state_classes(TRANSITIONS))
        assert [r.name for r in rotations] == ['state0', 'state1', 'state2']
        assert rotations[0].members == ('transformation0', 'transformation1', 'transformation2')
        assert rotations[1].members == ('transformation1', 'transformation2', 'transformation0')
        assert rotations[2].members == ('transformation2', 'transformation0', 'transformation1')

    def test_empty(self) -> None:
        assert define_rotations([]) == []

    def test_cycle_closes(self) -> None:
        rotations = define_rotations(define_state_classes(catalogue.initialize_transitions(Charset.DIGITS, 5)))
        successor = dict((a.name, b.name) for a, b in successors(rotations))
        for rotation in rotations:
            name = rotation.name
            visited = set()
            for _ in range(len(rotations)):
                visited.add(name)
                name = successor[name]
            assert name == rotation.name
            assert len(visited) == len(rotations)

    def test_single_state_is_its_own_successor(self) -> None:
        rotations = define_rotations(define_state_classes([['a']]))
        assert successors(rotations) == [(rotations[0], rotations[0])]


class TestCatalogue:
    def test_standard(self) -> None:
        transitions = catalogue.initialize_transitions(Charset.STANDARD, 3)
        assert len(transitions) == 4
        assert all(len(glyphs) == 36 for glyphs in transitions)
        assert transitions[0][0] == 'a'
        assert transitions[0][-1] == 'nine'
        assert transitions[1][26] == 'zero.ss01'
        assert transitions[3][25] == 'z.ss03'

    def test_digits(self) -> None:
        [base, ss01] = catalogue.initialize_transitions(Charset.DIGITS, 1)
        assert base == ['zero', 'one', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight', 'nine']
        assert ss01[0] == 'zero.ss01'

    @pytest.mark.parametrize('count', [0, catalogue.MAX_STYLISTIC_SETS + 1])
    def test_stylistic_set_bounds(self, count: int) -> None:
        with pytest.raises(ValueError):
            catalogue.initialize_transitions(Charset.LETTERS, count)
