from lstree.core.level_state import LevelState, LevelStateTable
from lstree.core.padding import (
    BRANCH,
    LAST_BRANCH,
    connector_glyph,
    entry_line,
    entry_lines,
    x_padding,
    y_padding,
)

IT = LevelState.ITERATING
LAST = LevelState.NOT_ITERATING


def test_connector_glyphs():
    assert connector_glyph(IT) == BRANCH == "├"
    assert connector_glyph(LAST) == LAST_BRANCH == "└"
    assert connector_glyph(LevelState.ROOT) == ""


def test_root_entry_is_emitted_raw():
    root = LevelStateTable.root()
    assert entry_line("docs/", root, 0, 3) == "docs/"
    assert entry_lines("docs/", root, 0, 3, 4) == ["docs/"]


def test_first_level_has_no_margin():
    levels = LevelStateTable.root().set(1, IT)
    assert x_padding(levels, 1, 3) == ""
    assert entry_line("a.txt", levels, 1, 3) == "├───a.txt"


def test_margin_follows_ancestor_state():
    levels = LevelStateTable.root().set(1, IT).set(2, LAST).set(3, LAST)
    assert x_padding(levels, 3, 3) == "│   " + "    "
    assert entry_line("f", levels, 3, 3) == "│       └───f"


def test_custom_x_spacing_is_used_everywhere():
    levels = LevelStateTable.root().set(1, IT).set(2, IT)
    assert entry_line("f", levels, 2, 1) == "│ ├─f"
    assert entry_line("f", levels, 2, 0) == "│├f"


def test_y_padding_rows_end_in_vertical_bar():
    levels = LevelStateTable.root().set(1, LAST).set(2, LAST)
    assert y_padding(levels, 2, 3, 3) == ["    │", "    │"]
    assert y_padding(levels, 2, 3, 1) == []
    assert y_padding(levels, 2, 3, 0) == []


def test_entry_lines_prepends_spacer_rows():
    levels = LevelStateTable.root().set(1, IT)
    assert entry_lines("a", levels, 1, 3, 2) == ["│", "├───a"]


def test_no_spacer_rows_before_first_line():
    levels = LevelStateTable.root().set(1, IT)
    assert entry_lines("a", levels, 1, 3, 2, first_line=True) == ["├───a"]
