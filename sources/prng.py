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

"""A reproducible pseudorandom number generator.

The generator is a linear congruential generator with well-known small
constants. Unlike `random.Random`, its sequence is trivial to reproduce
in any language, so a given seed always yields the same feature file no
matter which tool generated it.
"""


from typing import Final


_MULTIPLIER: Final[int] = 9301


_INCREMENT: Final[int] = 49297


_MODULUS: Final[int] = 233280


class SeededRandom:
    """A seeded linear congruential generator.

    Attributes:
        seed: The current state, in the range [0, 233280).
    """

    def __init__(self, seed: int) -> None:
        """Initializes this `SeededRandom`.

        Args:
            seed: The initial state. It is reduced modulo the modulus, so
                negative seeds are allowed.
        """
        self.seed = seed % _MODULUS

    def next(self) -> float:
        """Advances the state and returns a float in [0, 1).
        """
        self.seed = (self.seed * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self.seed / _MODULUS

    def randrange(self, stop: int) -> int:
        """Returns an integer in [0, `stop`).

        This consumes exactly one value from the sequence.

        Raises:
            ValueError: If `stop` is not positive.
        """
        if stop <= 0:
            raise ValueError(f'Empty range for randrange: {stop}')
        return int(self.next() * stop)
