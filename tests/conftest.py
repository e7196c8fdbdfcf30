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

from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Sequence
import itertools
import logging
from pathlib import Path
from typing import TypeAlias

import fontTools.agl
import fontTools.ttLib
from fontTools.feaLib.builder import addOpenTypeFeaturesFromString
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
import pytest
import uharfbuzz


FontFactory: TypeAlias = Callable[[Sequence[str], str], Path]


Shaper: TypeAlias = Callable[[Path, str], list[str]]


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undoes the logging configuration done by the command line.
    """
    root = logging.getLogger()
    handlers = [*root.handlers]
    level = root.level
    yield
    for handler in [*root.handlers]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def build_font(tmp_path: Path) -> FontFactory:
    """Returns a function that compiles a feature file into a test font.

    The font has an empty glyph for each glyph name. The glyphs whose
    names are in the Adobe Glyph List are mapped to their characters.
    """
    counter = itertools.count()

    def build(glyphs: Sequence[str], fea: str) -> Path:
        glyph_order = ['.notdef', *glyphs]
        builder = FontBuilder(1000, isTTF=True)
        builder.setupGlyphOrder(glyph_order)
        builder.setupCharacterMap({
            fontTools.agl.AGL2UV[glyph]: glyph
            for glyph in glyphs
            if glyph in fontTools.agl.AGL2UV
        })
        builder.setupGlyf({glyph: TTGlyphPen(None).glyph() for glyph in glyph_order})
        builder.setupHorizontalMetrics({glyph: (500, 0) for glyph in glyph_order})
        builder.setupHorizontalHeader(ascent=800, descent=-200)
        builder.setupNameTable({'familyName': 'Pseudorandom Test', 'styleName': 'Regular'})
        builder.setupOS2()
        builder.setupPost()
        addOpenTypeFeaturesFromString(builder.font, fea)
        path = tmp_path / f'test{next(counter)}.ttf'
        builder.save(path)
        return path
    return build


@pytest.fixture
def shape() -> Shaper:
    """Returns a function that shapes text and returns the glyph names.
    """
    def shape(path: Path, text: str) -> list[str]:
        glyph_order = fontTools.ttLib.TTFont(path).getGlyphOrder()
        buffer = uharfbuzz.Buffer()
        buffer.add_str(text)
        buffer.guess_segment_properties()
        hb_font = uharfbuzz.Font(uharfbuzz.Face(uharfbuzz.Blob.from_file_path(str(path))))
        uharfbuzz.shape(hb_font, buffer)
        return [glyph_order[info.codepoint] for info in buffer.glyph_infos]
    return shape
