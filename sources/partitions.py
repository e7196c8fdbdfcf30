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

__all__ = [
    'generate_partitions',
]


from collections.abc import Sequence
import logging

from prng import SeededRandom
from states import StateClass
from utils import PARTITION_CLASS_PREFIX


log = logging.getLogger(__name__)


def generate_partitions(
    glyphs: Sequence[str],
    k: int,
    rng: SeededRandom,
) -> Sequence[StateClass]:
    """Randomly splits a glyph universe into disjoint partitions.

    Glyphs are dealt round-robin to the partitions, each one drawn
    uniformly from the glyphs not yet dealt. There are as many rounds as
    fit completely, so the last ``len(glyphs) % k`` glyphs of the
    shuffled pool are not in any partition. If ``k > len(glyphs)``, every
    partition is empty.

    Args:
        glyphs: The glyph universe. Each element is dealt at most once,
            even if it is a duplicate of another element.
        k: The number of partitions.
        rng: The generator to draw from. Exactly
            ``k * (len(glyphs) // k)`` values are drawn.

    Returns:
        The partitions, named ``partition0`` to ``partition{k-1}``, each
        sorted by glyph name.

    Raises:
        ValueError: If `k` is negative.
    """
    if k < 0:
        raise ValueError(f'Negative partition count: {k}')
    if k == 0:
        return []
    pool = [*glyphs]
    partitions: list[list[str]] = [[] for _ in range(k)]
    group_size = len(pool) // k
    for _ in range(group_size):
        for partition in partitions:
            if not pool:
                break
            # The draw indices depend on the order of the remaining pool.
            partition.append(pool.pop(rng.randrange(len(pool))))
    if group_size == 0:
        log.warning('%d partitions for %d glyphs; all partitions are empty', k, len(glyphs))
    elif pool:
        log.debug('%d glyphs are not in any partition: %s', len(pool), ' '.join(sorted(pool)))
    return [StateClass(f'{PARTITION_CLASS_PREFIX}{i}', sorted(partition)) for i, partition in enumerate(partitions)]
