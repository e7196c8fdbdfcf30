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

"""Miscellaneous constants, functions, and classes.
"""


from __future__ import annotations

import re
from typing import Final
from typing import Generic
from typing import TYPE_CHECKING
from typing import TypeVar


if TYPE_CHECKING:
    from collections.abc import Iterable


#: The seed of the pseudorandom sequence. Changing it gives a different
#: distribution of glyphs among the partitions.
DEFAULT_SEED: Final[int] = 0


#: The number of lookup layers. Each layer looks one glyph further back
#: than the previous one. A greater depth means longer-range triggers but
#: more work for the shaper.
DEFAULT_DEPTH: Final[int] = 10


#: The number of partitions of the glyph universe. More partitions give
#: a different texture to the randomness.
DEFAULT_PARTITIONS: Final[int] = 4


#: The number of stylistic sets in the built-in catalogue, not counting
#: the base glyphs.
DEFAULT_STYLISTIC_SETS: Final[int] = 3


#: The tag of the feature wrapping the generated program.
DEFAULT_FEATURE: Final[str] = 'calt'


#: The prefix of the names of the classes of glyphs in a single state.
TRANSFORMATION_CLASS_PREFIX: Final[str] = 'transformation'


#: The prefix of the names of the classes listing all the states,
#: rotated to start at a given state.
STATE_CLASS_PREFIX: Final[str] = 'state'


#: The prefix of the names of the partition classes.
PARTITION_CLASS_PREFIX: Final[str] = 'partition'


#: The name of the class containing every glyph.
ALL_CLASS: Final[str] = 'All'


#: The name of the class used to skip over one glyph of any kind.
SKIP_CLASS: Final[str] = 'skip'


#: The pattern of feature tags that feaLib reads as a bare name.
FEATURE_TAG_PATTERN: Final = re.compile(r'[A-Za-z_][A-Za-z0-9_.]{3}')


def lookup_name(depth: int, transition_index: int) -> str:
    """Returns the name of the lookup for a transition in a layer.

    Args:
        depth: The index of the layer, which is also the number of
            glyphs the lookup skips.
        transition_index: The index of the transition within the layer.
    """
    return f'{SKIP_CLASS}{depth}_{PARTITION_CLASS_PREFIX}{transition_index}'


def check_feature_tag(tag: str) -> str:
    """Returns a feature tag unchanged if it is valid.

    Raises:
        ValueError: If `tag` does not match `FEATURE_TAG_PATTERN`.
    """
    if not FEATURE_TAG_PATTERN.fullmatch(tag):
        raise ValueError(f"Invalid feature tag: '{tag}'")
    return tag


T = TypeVar('T')


class OrderedSet(dict[T, None], Generic[T]):
    """An ordered set.

    It is a `dict` where the values are all ``None``, with a set-like
    API on top.
    """

    def __init__(
        self,
        iterable: Iterable[T] | None = None,
        /,
    ) -> None:
        """Initializes this `OrderedSet`.

        Args:
            iterable: An optional iterable whose items are to be added
                to this set in the iterable’s natural iteration order.
        """
        super().__init__()
        if iterable:
            for item in iterable:
                self.add(item)

    def add(self, item: T, /) -> None:
        """Adds an item to this set.

        Adding an item that is already present does not move it.

        Args:
            item: An item.
        """
        self[item] = None
