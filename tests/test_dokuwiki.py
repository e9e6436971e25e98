"""Tests for the DokuWiki converter."""

import pytest

from barelyml.formats.dokuwiki import (
    DokuWikiConverter,
    barelyml_to_dokuwiki,
    dokuwiki_to_barelyml,
)


class TestDokuWikiToBarelyML:
    """Tests for DokuWiki -> BarelyML."""

    @pytest.mark.parametrize(
        "dw,expected",
        [
            ("====== Title ======", "# Title"),
            ("===== Two =====", "## Two"),
            ("==== Three ====", "### Three"),
            ("=== Four ===", "#### Four"),
            ("== Five ==", "##### Five"),
            ("======= Seven =======", "# Seven"),
        ],
    )
    def test_headings(self, dw: str, expected: str):
        """Test heading levels (more "=" means a higher level)."""
        assert dokuwiki_to_barelyml(dw) == expected

    def test_not_a_heading(self):
        """Test that an arrow is not mistaken for a heading."""
        assert dokuwiki_to_barelyml("==> next") == "==> next"

    def test_emphasis(self):
        """Test bold and italic markers."""
        assert dokuwiki_to_barelyml("**b** and //i//") == "*b* and _i_"

    def test_url_is_not_italic(self):
        """Test that "//" after a colon is left alone."""
        assert dokuwiki_to_barelyml("see http://x.org") == "see http://x.org"

    def test_underline_dropped(self):
        """Test that underline markers are removed."""
        assert dokuwiki_to_barelyml("__under__") == "under"

    def test_links_untouched(self):
        """Test that DokuWiki links already use BarelyML syntax."""
        dw = "[[https://x.org/a//b|**label**]]"
        assert dokuwiki_to_barelyml(dw) == dw

    def test_colours(self):
        """Test colour plugin tags."""
        assert dokuwiki_to_barelyml("<color red>x</color>") == "<c:red>x</c>"
        assert dokuwiki_to_barelyml("<color #f00/#fff>x</color>") == "<c#f00>x</c>"

    def test_image_spaces_stripped(self):
        """Test that alignment spaces inside image markup are dropped."""
        assert dokuwiki_to_barelyml("{{ pic.png?50 }}") == "{{pic.png?50}}"

    def test_unordered_list_levels(self):
        """Test two-space indentation per level."""
        assert dokuwiki_to_barelyml("  * a\n    * b") == "- a\n - b"

    def test_ordered_counters(self):
        """Test that consecutive ordered items count up."""
        dw = "  - one\n  - two\n  - three"

        assert dokuwiki_to_barelyml(dw) == "1. one\n2. two\n3. three"

    def test_nested_counter_starts_at_one(self):
        """Test that a deeper level has its own counter."""
        dw = "  - one\n  - two\n  - three\n    - inner"

        assert dokuwiki_to_barelyml(dw).split("\n")[3] == " 1. inner"

    def test_outer_counter_after_nesting(self):
        """Returning to the outer level continues its count.

        Only deeper counters are reset by an item; the outer count is
        not restarted after the nested run ends.
        """
        dw = "  - one\n  - two\n  - three\n    - inner\n  - four"

        assert dokuwiki_to_barelyml(dw).split("\n")[4] == "4. four"

    def test_text_line_resets_counters(self):
        """Test that any non-list line restarts numbering."""
        dw = "  - a\n  - b\ntext\n  - c"

        assert dokuwiki_to_barelyml(dw) == "1. a\n2. b\ntext\n1. c"

    def test_unordered_item_resets_its_level(self):
        """Test that an unordered item restarts numbering at its level."""
        dw = "  - a\n  * b\n  - c"

        assert dokuwiki_to_barelyml(dw) == "1. a\n- b\n1. c"


class TestBarelyMLToDokuWiki:
    """Tests for BarelyML -> DokuWiki."""

    def test_headings(self):
        """Test heading markers on both sides."""
        assert barelyml_to_dokuwiki("# Title") == "====== Title ======"
        assert barelyml_to_dokuwiki("##### Small") == "== Small =="

    def test_emphasis(self):
        """Test bold and italic markers."""
        assert barelyml_to_dokuwiki("*b* _i_") == "**b** //i//"

    def test_markup_protected(self):
        """Test that links and images keep their "_" characters."""
        bml = "[[my_page|a_b]] {{my_pic.png}}"
        assert barelyml_to_dokuwiki(bml) == bml

    def test_colours(self):
        """Test colour tags."""
        assert barelyml_to_dokuwiki("<c:red>x</c>") == "<color red>x</color>"
        assert barelyml_to_dokuwiki("<c#F00>x</c>") == "<color #F00>x</color>"

    def test_lists(self):
        """Test list markers and indentation."""
        bml = "- a\n1. b\n 2. c"

        assert barelyml_to_dokuwiki(bml) == "  * a\n  - b\n    - c"


class TestDokuWikiConverter:
    """Tests for the converter class."""

    def test_properties(self):
        """Test name and extensions."""
        converter = DokuWikiConverter()

        assert converter.name == "dokuwiki"
        assert ".dw" in converter.extensions

    def test_ordered_list_round_trip(self):
        """Test that numbering is regenerated after a round trip."""
        converter = DokuWikiConverter()
        bml = "1. a\n2. b\n 1. c"

        assert converter.to_barelyml(converter.from_barelyml(bml)) == bml
