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

"""The feature compiler.

`Builder` runs the whole pipeline for one catalogue and one set of
parameters: it defines the state classes and their rotations, partitions
the glyph universe, builds the lookup chain, and assembles everything
into a fontTools feaLib AST of a single feature block.
"""


from __future__ import annotations

import logging
from typing import Final
from typing import TYPE_CHECKING

import fontTools.feaLib.ast

import lookups
import partitions
from prng import SeededRandom
import states
from states import StateClass
from utils import ALL_CLASS
from utils import DEFAULT_DEPTH
from utils import DEFAULT_FEATURE
from utils import DEFAULT_PARTITIONS
from utils import DEFAULT_SEED
from utils import OrderedSet
from utils import SKIP_CLASS
from utils import check_feature_tag


if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Mapping
    from collections.abc import MutableMapping
    from collections.abc import Sequence


log = logging.getLogger(__name__)


class Builder:
    """A builder of a pseudorandom contextual alternates feature.

    Attributes:
        transitions: The glyph lists of the states, in cycle order.
        glyphs: The glyph universe to partition. It defaults to the
            concatenation of `transitions`.
        seed: The seed of the pseudorandom sequence.
        depth: The number of lookup layers.
        partition_count: The number of partitions.
        feature: The feature tag.
    """

    def __init__(
        self,
        transitions: Sequence[Sequence[str]],
        glyphs: Sequence[str] | None = None,
        *,
        seed: int = DEFAULT_SEED,
        depth: int = DEFAULT_DEPTH,
        partition_count: int = DEFAULT_PARTITIONS,
        feature: str = DEFAULT_FEATURE,
    ) -> None:
        """Initializes this `Builder`.

        Raises:
            ValueError: If `feature` is not a valid feature tag or if
                `depth` or `partition_count` is negative.
        """
        if depth < 0:
            raise ValueError(f'Negative depth: {depth}')
        if partition_count < 0:
            raise ValueError(f'Negative partition count: {partition_count}')
        self.transitions: Final = transitions
        self.glyphs: Final[Sequence[str]] = [glyph for glyphs in transitions for glyph in glyphs] if glyphs is None else glyphs
        self.seed: Final = seed
        self.depth: Final = depth
        self.partition_count: Final = partition_count
        self.feature: Final = check_feature_tag(feature)
        self._fea: fontTools.feaLib.ast.FeatureFile | None = None

    def _add_comment(self, block: fontTools.feaLib.ast.Block, text: str) -> None:
        block.statements.append(fontTools.feaLib.ast.Comment(f'# {text}'))

    def convert_classes(
        self,
        block: fontTools.feaLib.ast.Block,
        classes: Iterable[StateClass],
        class_asts: MutableMapping[str, fontTools.feaLib.ast.GlyphClassDefinition],
        *,
        nested: bool = False,
    ) -> None:
        """Adds glyph class definitions to a block.

        Args:
            block: The block to add the definitions to.
            classes: The classes to define.
            class_asts: A map to glyph classes from their names. The new
                definitions are added to it.
            nested: Whether the members of `classes` are the names of
                classes in `class_asts` rather than glyph names.
        """
        for cls in classes:
            assert cls.name not in class_asts, f'Duplicate class: {cls.name}'
            if nested:
                glyph_class = fontTools.feaLib.ast.GlyphClass()
                for member in cls.members:
                    glyph_class.add_class(fontTools.feaLib.ast.GlyphClassName(class_asts[member]))
            else:
                glyph_class = fontTools.feaLib.ast.GlyphClass([*cls.members])
            class_ast = fontTools.feaLib.ast.GlyphClassDefinition(cls.name, glyph_class)
            block.statements.append(class_ast)
            class_asts[cls.name] = class_ast

    def convert_lookups(
        self,
        block: fontTools.feaLib.ast.Block,
        layers: Sequence[Sequence[lookups.Lookup]],
        class_asts: Mapping[str, fontTools.feaLib.ast.GlyphClassDefinition],
    ) -> None:
        """Adds lookup blocks to a block, deepest layer first.

        Args:
            block: The block to add the lookups to.
            layers: The layers of lookups in increasing order by depth.
            class_asts: A map to glyph classes from their names.
        """
        for layer in reversed(layers):
            for lookup in layer:
                block.statements.append(lookup.to_ast(class_asts))

    def augment(self) -> None:
        """Runs the pipeline and builds the feature file AST.
        """
        state_classes = states.define_state_classes(self.transitions)
        rotations = states.define_rotations(state_classes)
        rng = SeededRandom(self.seed)
        partition_classes = partitions.generate_partitions(self.glyphs, self.partition_count, rng)
        all_class = StateClass(ALL_CLASS, OrderedSet(self.glyphs))
        skip_class = StateClass(SKIP_CLASS, [ALL_CLASS])
        layers = lookups.generate_lookups(rotations, partition_classes, skip_class, self.depth)

        fea = fontTools.feaLib.ast.FeatureFile()
        self._add_comment(fea, f'OpenType pseudorandom {self.feature} feature')
        self._add_comment(fea, f'seed: {self.seed}, depth: {self.depth}, partitions: {self.partition_count}')
        feature = fontTools.feaLib.ast.FeatureBlock(self.feature)
        class_asts: dict[str, fontTools.feaLib.ast.GlyphClassDefinition] = {}
        self._add_comment(feature, 'States')
        self.convert_classes(feature, state_classes, class_asts)
        self._add_comment(feature, 'Rotations')
        self.convert_classes(feature, rotations, class_asts, nested=True)
        self._add_comment(feature, 'Partitions')
        self.convert_classes(feature, partition_classes, class_asts)
        self._add_comment(feature, 'Contexts')
        self.convert_classes(feature, [all_class], class_asts)
        self.convert_classes(feature, [skip_class], class_asts, nested=True)
        if any(layers):
            self._add_comment(feature, 'Lookups')
            self.convert_lookups(feature, layers, class_asts)
        fea.statements.append(feature)
        log.info(
            '%d states, %d partitions, %d lookups',
            len(state_classes),
            len(partition_classes),
            sum(map(len, layers)),
        )
        self._fea = fea

    @property
    def fea(self) -> fontTools.feaLib.ast.FeatureFile:
        """The feature file AST, built on first access.
        """
        if self._fea is None:
            self.augment()
            assert self._fea is not None
        return self._fea

    def as_fea(self) -> str:
        """Returns the feature file as text.
        """
        return self.fea.asFea()


def compile_feature(
    transitions: Sequence[Sequence[str]],
    glyphs: Sequence[str] | None = None,
    *,
    seed: int = DEFAULT_SEED,
    depth: int = DEFAULT_DEPTH,
    partition_count: int = DEFAULT_PARTITIONS,
    feature: str = DEFAULT_FEATURE,
) -> str:
    """Returns the feature file text for a catalogue.

    See `Builder` for the meanings of the arguments.
    """
    return Builder(
        transitions,
        glyphs,
        seed=seed,
        depth=depth,
        partition_count=partition_count,
        feature=feature,
    ).as_fea()
