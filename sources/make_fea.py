#!/usr/bin/env python3

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

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import TYPE_CHECKING

from fontTools import configLogger

import catalogue
import charsets
import quantum
from utils import DEFAULT_DEPTH
from utils import DEFAULT_FEATURE
from utils import DEFAULT_PARTITIONS
from utils import DEFAULT_SEED
from utils import DEFAULT_STYLISTIC_SETS
from utils import check_feature_tag


if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Sequence


log = logging.getLogger()


def bounded_int(minimum: int, maximum: int | None = None) -> Callable[[str], int]:
    def parse(s: str) -> int:
        try:
            value = int(s)
        except ValueError:
            raise argparse.ArgumentTypeError(f'invalid integer: {s!r}') from None
        if value < minimum or maximum is not None and value > maximum:
            bounds = f'at least {minimum}' if maximum is None else f'between {minimum} and {maximum}'
            raise argparse.ArgumentTypeError(f'must be {bounds}: {value}')
        return value
    return parse


def feature_tag(s: str) -> str:
    try:
        return check_feature_tag(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def make_fea(options: argparse.Namespace) -> str:
    transitions = catalogue.initialize_transitions(options.charset, options.stylistic_sets)
    return quantum.compile_feature(
        transitions,
        seed=options.seed,
        depth=options.depth,
        partition_count=options.partitions,
        feature=options.feature,
    )


def parse_args(args: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Generate a pseudorandom contextual alternates feature.')
    parser.add_argument(
        '--charset', default=charsets.Charset.STANDARD, type=charsets.Charset,
        help=f'The base glyphs, one of {{{", ".join(c.value for c in charsets.Charset)}}} (default: %(default)s).',
    )
    parser.add_argument('--depth', default=DEFAULT_DEPTH, type=bounded_int(0), help='The number of lookup layers (default: %(default)s).')
    parser.add_argument('--feature', default=DEFAULT_FEATURE, type=feature_tag, help='The feature tag (default: %(default)s).')
    parser.add_argument('--output', metavar='FILE', type=Path, help='output feature file (default: standard output)')
    parser.add_argument('--partitions', default=DEFAULT_PARTITIONS, type=bounded_int(1), help='The number of partitions (default: %(default)s).')
    parser.add_argument('--seed', default=DEFAULT_SEED, type=int, help='The pseudorandom seed (default: %(default)s).')
    parser.add_argument(
        '--stylistic-sets', default=DEFAULT_STYLISTIC_SETS, type=bounded_int(1, catalogue.MAX_STYLISTIC_SETS),
        help='The number of stylistic sets to cycle through after the base glyphs (default: %(default)s).',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debugging information.')
    return parser.parse_args(args)


def main(args: Sequence[str] | None = None) -> None:
    options = parse_args(args)
    configLogger(logger=log, level=logging.DEBUG if options.verbose else logging.WARNING)
    fea = make_fea(options)
    if options.output is None:
        sys.stdout.write(fea)
    else:
        options.output.resolve().parent.mkdir(parents=True, exist_ok=True)
        with options.output.open('w', encoding='utf-8') as output:
            output.write(fea)
        log.info('Wrote %s', options.output)


if __name__ == '__main__':
    main()
