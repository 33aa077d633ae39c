from __future__ import annotations

from pathlib import Path

import pytest

from ucfinder.api.finder import CharacterFinder
from ucfinder.core.index import UnicodeIndex
from ucfinder.core.parser import load_index


PDF = "http://www.unicode.org/charts/PDF"

SAMPLE_LINES = [
    f"[0000\t007F\tBasic Latin\tU0000.pdf\t{PDF}/U0000.pdf",
    f"[0080\t00FF\tLatin-1 Supplement\tU0080.pdf\t{PDF}/U0080.pdf",
    f"[0370\t03FF\tGreek and Coptic\tU0370.pdf\t{PDF}/U0370.pdf",
    f"[2600\t26FF\tMiscellaneous Symbols\tU2600.pdf\t{PDF}/U2600.pdf",
    f"[1F600\t1F64F\tEmoticons\tU1F600.pdf\t{PDF}/U1F600.pdf",
    "&nbsp\t00A0",
    "&Eacute\t00C9",
    "&eacute\t00E9",
    "&Alpha\t0391",
    "&alpha\t03B1",
    "&amp\t0026",
    "32\tSPACE",
    "\tEXCLAMATION MARK",
    "32\tLATIN CAPITAL LETTER A",
    "\tLATIN CAPITAL LETTER B",
    "31\tLATIN SMALL LETTER A",
    "\tLATIN SMALL LETTER B",
    "62\tNO-BREAK SPACE\tNBSP",
    "41\tLATIN CAPITAL LETTER E WITH ACUTE",
    "32\tLATIN SMALL LETTER E WITH ACUTE",
    "680\tGREEK CAPITAL LETTER ALPHA",
    "32\tGREEK SMALL LETTER ALPHA",
    "\tGREEK SMALL LETTER BETA",
    "8785\tSNOWMAN",
    "118781\tGRINNING FACE\t",
]

SAMPLE_DATA = "\n".join(SAMPLE_LINES) + "\n"


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_DATA


@pytest.fixture
def index() -> UnicodeIndex:
    return load_index(SAMPLE_DATA)


@pytest.fixture
def finder(index: UnicodeIndex) -> CharacterFinder:
    return CharacterFinder(index)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "char-data-nounihan.txt"
    path.write_text(SAMPLE_DATA, encoding="utf-8")
    return path
