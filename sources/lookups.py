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

r"""The lookup chain.

The generated feature consists of layers of named lookups. Every lookup
in layer ``d`` contains one rule of the form::

    sub @partitionJ @skip @skip … @stateI' by @stateI+1;

with ``d`` copies of ``@skip``. The rule advances a glyph to its next
state if the glyph ``d + 1`` positions before it is in a certain
partition. Since the partitions are random, so is the sequence of states
a run of text goes through.

The layers are emitted deepest first. A shaper applies lookups in order,
so the lookups that look furthest back get the first chance to change a
glyph.
"""


from __future__ import annotations

from typing import Final
from typing import TYPE_CHECKING

import fontTools.feaLib.ast

from states import successors
from utils import lookup_name


if TYPE_CHECKING:
    from collections.abc import Mapping
    from collections.abc import Sequence

    from states import StateClass


class Rule:
    """A chained contextual single substitution from one class to
    another.

    The sequences contain class names, without the ``@``. A rule is
    therefore only interpretable in the context of something that maps
    class names to their definitions.

    Attributes:
        contexts_in: The backtrack sequence.
        input: The input class.
        output: The output class, of the same length as `input`.
    """

    def __init__(
        self,
        contexts_in: Sequence[str],
        input: str,
        output: str,
    ) -> None:
        self.contexts_in: Final = [*contexts_in]
        self.input: Final = input
        self.output: Final = output

    def to_ast(
        self,
        class_asts: Mapping[str, fontTools.feaLib.ast.GlyphClassDefinition],
    ) -> fontTools.feaLib.ast.SingleSubstStatement:
        """Converts this rule to a fontTools feaLib AST.

        The rule is always marked as contextual, even with an empty
        backtrack sequence, so that the input is written with a ``'``.

        Args:
            class_asts: A map to glyph classes from their names.

        Raises:
            KeyError: If a class used by this rule is not in
                `class_asts`.
        """
        def class_to_ast(name: str) -> fontTools.feaLib.ast.GlyphClassName:
            return fontTools.feaLib.ast.GlyphClassName(class_asts[name])

        return fontTools.feaLib.ast.SingleSubstStatement(
            [class_to_ast(self.input)],
            [class_to_ast(self.output)],
            [*map(class_to_ast, self.contexts_in)],
            [],
            True,
        )


class Lookup:
    """A named lookup.

    Attributes:
        name: The name of the lookup.
        depth: The number of glyphs the rules skip over, which is also
            the index of this lookup’s layer.
        rules: The list of rules.
    """

    def __init__(self, name: str, depth: int) -> None:
        self.name: Final = name
        self.depth: Final = depth
        self.rules: Final[list[Rule]] = []

    def append(self, rule: Rule) -> None:
        """Adds a rule to the end of the list of rules.
        """
        self.rules.append(rule)

    def to_ast(
        self,
        class_asts: Mapping[str, fontTools.feaLib.ast.GlyphClassDefinition],
    ) -> fontTools.feaLib.ast.LookupBlock:
        """Converts this lookup to a fontTools feaLib AST.

        Args:
            class_asts: A map to glyph classes from their names.
        """
        lookup_block = fontTools.feaLib.ast.LookupBlock(self.name)
        lookup_block.statements.extend(rule.to_ast(class_asts) for rule in self.rules)
        return lookup_block


def generate_lookups(
    rotations: Sequence[StateClass],
    partitions: Sequence[StateClass],
    skip: StateClass,
    depth: int,
) -> Sequence[Sequence[Lookup]]:
    """Builds the layers of the lookup chain.

    Transition ``i`` in each layer goes from rotation ``i`` to the next
    rotation, wrapping around at the end. Its trigger is a partition
    counted from the end: the last partition for the first transition,
    the second-to-last for the second, and so on, cycling if there are
    more transitions than partitions.

    Args:
        rotations: The rotations of the states.
        partitions: The partitions of the glyph universe.
        skip: The class matching any glyph.
        depth: The number of layers.

    Returns:
        The layers in increasing order by depth. Each layer has one
        lookup per rotation.

    Raises:
        ValueError: If `depth` is negative, or if there are no
            partitions although there are lookups to build.
    """
    if depth < 0:
        raise ValueError(f'Negative depth: {depth}')
    if depth and rotations and not partitions:
        raise ValueError('At least one partition is needed to build lookups')
    transitions = successors(rotations)
    layers = []
    for d in range(depth):
        layer = []
        for i, (from_state, to_state) in enumerate(transitions):
            partition = partitions[len(partitions) - 1 - i % len(partitions)]
            lookup = Lookup(lookup_name(d, i), d)
            lookup.append(Rule([partition.name, *[skip.name] * d], from_state.name, to_state.name))
            layer.append(lookup)
        layers.append(layer)
    return layers
