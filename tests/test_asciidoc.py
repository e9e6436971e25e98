"""Tests for the AsciiDoc converter."""

import pytest

from barelyml.formats.asciidoc import (
    AsciiDocConverter,
    asciidoc_to_barelyml,
    barelyml_to_asciidoc,
)


class TestAsciiDocToBarelyML:
    """Tests for AsciiDoc -> BarelyML."""

    @pytest.mark.parametrize(
        "ad,bml",
        [
            ("NOTE: hi", "INFO: hi"),
            ("TIP: try", "HINT: try"),
            ("IMPORTANT: x", "IMPORTANT: x"),
            ("CAUTION: x", "CAUTION: x"),
            ("WARNING: x", "WARNING: x"),
        ],
    )
    def test_admonitions(self, ad: str, bml: str):
        """Test admonition label mapping."""
        assert asciidoc_to_barelyml(ad) == bml

    @pytest.mark.parametrize(
        "ad,bml",
        [
            ("= Title", "# Title"),
            ("== Section ==", "## Section"),
            ("===== Five", "##### Five"),
            ("====== Six", "##### Six"),
        ],
    )
    def test_headings(self, ad: str, bml: str):
        """Test heading levels, capped at five."""
        assert asciidoc_to_barelyml(ad) == bml

    def test_lists(self):
        """Test ordered numbering and unordered markers."""
        ad = ". one\n. two\n.. nested\n* bullet\n** sub\n- dash"

        assert asciidoc_to_barelyml(ad) == (
            "1. one\n2. two\n 1. nested\n- bullet\n - sub\n- dash"
        )

    def test_list_counter_reset_by_text(self):
        """Test that a paragraph between lists restarts numbering."""
        assert asciidoc_to_barelyml(". a\ntext\n. b") == "1. a\ntext\n1. b"

    def test_unconstrained_emphasis(self):
        """Test that doubled markers collapse to single ones."""
        assert asciidoc_to_barelyml("**bold** and __it__") == "*bold* and _it_"

    def test_constrained_emphasis_unchanged(self):
        """Test that single markers already match BarelyML."""
        assert asciidoc_to_barelyml("*b* _i_") == "*b* _i_"

    def test_bare_url_with_label(self):
        """Test a URL followed by a bracketed label."""
        ad = "See https://x.org[site] now"

        assert asciidoc_to_barelyml(ad) == "See [[https://x.org|site]] now"

    def test_bare_url(self):
        """Test a bare URL."""
        assert asciidoc_to_barelyml("Visit https://x.org today") == (
            "Visit [[https://x.org]] today"
        )

    def test_link_macro(self):
        """Test the link: macro."""
        assert asciidoc_to_barelyml("link:docs/index.html[Docs]") == (
            "[[docs/index.html|Docs]]"
        )

    def test_url_markup_not_restyled(self):
        """Test that "__" inside a URL survives emphasis rewriting."""
        assert asciidoc_to_barelyml("link:a__b.html[x]") == "[[a__b.html|x]]"

    @pytest.mark.parametrize(
        "ad,bml",
        [
            ("image::pic.png[]", "{{pic.png}}"),
            ("image::pic.png[Alt,200]", "{{pic.png?200}}"),
            ("image::pic.png[width=120]", "{{pic.png?120}}"),
            ("an image:icon.png[] inline", "an {{icon.png}} inline"),
            ("image:icon.png[link=https://x.org]", "[[https://x.org|{{icon.png}}]]"),
        ],
    )
    def test_images(self, ad: str, bml: str):
        """Test block and inline image macros."""
        assert asciidoc_to_barelyml(ad) == bml

    def test_role_colour(self):
        """Test that a role span becomes a named colour."""
        assert asciidoc_to_barelyml("[red]#warning#") == "<c:red>warning</c>"


class TestAsciiDocTables:
    """Tests for AsciiDoc table conversion."""

    def test_header_option(self):
        """Test [%header] on a table."""
        ad = "[%header]\n|===\n| A | B\n| 1 | 2\n|==="

        assert asciidoc_to_barelyml(ad) == "^ A ^ B ^\n| 1 | 2 |"

    def test_options_header_attribute(self):
        """Test the long form options="header"."""
        ad = '[options="header"]\n|===\n| A | B\n| 1 | 2\n|==='

        assert asciidoc_to_barelyml(ad) == "^ A ^ B ^\n| 1 | 2 |"

    def test_implicit_header(self):
        """Test that a first row followed by a blank line is a header."""
        ad = "|===\n| A | B\n\n| 1 | 2\n|==="

        assert asciidoc_to_barelyml(ad) == "^ A ^ B ^\n| 1 | 2 |"

    def test_body_only(self):
        """Test a table without any header."""
        ad = "|===\n| 1 | 2\n| 3 | 4\n|==="

        assert asciidoc_to_barelyml(ad) == "| 1 | 2 |\n| 3 | 4 |"

    def test_one_cell_per_line_with_cols(self):
        """Test cells spread over lines with an explicit column count."""
        ad = '[cols="2*"]\n|===\n|A\n|B\n|1\n|2\n|==='

        assert asciidoc_to_barelyml(ad) == "| A | B |\n| 1 | 2 |"

    def test_cols_list(self):
        """Test a column count given as a list of specs."""
        ad = '[cols="1,3"]\n|===\n|A\n|B\n|==='

        assert asciidoc_to_barelyml(ad) == "| A | B |"

    def test_continuation_line(self):
        """Test that a line without "|" continues the previous cell."""
        ad = "|===\n| a | b\n| first\nsecond\n| d\n|==="

        assert asciidoc_to_barelyml(ad) == "| a | b |\n| first second | d |"

    def test_cell_markup_converted(self):
        """Test inline conversion inside cells."""
        ad = "|===\n| **x** | https://x.org[site]\n|==="

        assert asciidoc_to_barelyml(ad) == "| *x* | [[https://x.org|site]] |"

    def test_unclosed_table_is_flushed(self):
        """Test that a table running to the end of input is kept."""
        assert asciidoc_to_barelyml("|===\n| a | b") == "| a | b |"

    def test_text_around_table(self):
        """Test that lines outside the table are converted normally."""
        ad = "before\n|===\n| a\n|===\nNOTE: after"

        assert asciidoc_to_barelyml(ad) == "before\n| a |\nINFO: after"


class TestBarelyMLToAsciiDoc:
    """Tests for BarelyML -> AsciiDoc."""

    def test_admonitions(self):
        """Test admonition label mapping back."""
        assert barelyml_to_asciidoc("INFO: hi") == "NOTE: hi"
        assert barelyml_to_asciidoc("HINT: x") == "TIP: x"
        assert barelyml_to_asciidoc("WARNING: x") == "WARNING: x"

    def test_headings(self):
        """Test heading markers."""
        assert barelyml_to_asciidoc("# T\n### S") == "= T\n=== S"

    def test_lists(self):
        """Test list markers by level."""
        bml = "1. a\n2. b\n 1. c\n- d\n - e"

        assert barelyml_to_asciidoc(bml) == ". a\n. b\n.. c\n* d\n** e"

    def test_links(self):
        """Test bare URLs and the link: macro."""
        assert barelyml_to_asciidoc("see [[https://x.org|site]]") == "see https://x.org[site]"
        assert barelyml_to_asciidoc("[[https://x.org]]") == "https://x.org"
        assert barelyml_to_asciidoc("[[page.html|Page]]") == "link:page.html[Page]"
        assert barelyml_to_asciidoc("[[page.html]]") == "link:page.html[]"

    def test_link_not_at_word_boundary(self):
        """Test that a URL glued to text uses the link: macro."""
        assert barelyml_to_asciidoc("(x[[https://x.org|y]])") == "(xlink:https://x.org[y])"

    def test_linked_image(self):
        """Test an image used as a link label."""
        assert barelyml_to_asciidoc("[[https://x|{{logo.png}}]]") == (
            "image:logo.png[link=https://x]"
        )

    def test_images(self):
        """Test block and inline images."""
        assert barelyml_to_asciidoc("{{pic.png?100}}") == "image::pic.png[width=100]"
        assert barelyml_to_asciidoc("{{pic.png}}") == "image::pic.png[]"
        assert barelyml_to_asciidoc("an {{i.png}} icon") == "an image:i.png[] icon"

    def test_colours(self):
        """Test named colours become roles and hex colours are dropped."""
        assert barelyml_to_asciidoc("<c:red>x</c>") == "[red]#x#"
        assert barelyml_to_asciidoc("<c#F00>x</c>") == "x"
        assert barelyml_to_asciidoc("<c:red>open") == "[red]#open#"

    def test_table_with_header(self):
        """Test a table whose first row is all header cells."""
        bml = "^ A ^ B ^\n| 1 | 2 |"

        assert barelyml_to_asciidoc(bml) == "[%header]\n|===\n|A |B\n|1 |2\n|==="

    def test_table_without_header(self):
        """Test a body-only table followed by text."""
        bml = "| 1 | 2 |\nafter"

        assert barelyml_to_asciidoc(bml) == "|===\n|1 |2\n|===\nafter"


class TestAsciiDocConverter:
    """Tests for the converter class."""

    def test_properties(self):
        """Test name and extensions."""
        converter = AsciiDocConverter()

        assert converter.name == "asciidoc"
        assert ".adoc" in converter.extensions

    def test_admonition_round_trip(self):
        """Test NOTE -> INFO -> NOTE."""
        converter = AsciiDocConverter()

        assert converter.from_barelyml(converter.to_barelyml("NOTE: hi")) == "NOTE: hi"

    def test_table_round_trip(self):
        """Test that a header table survives both directions."""
        converter = AsciiDocConverter()
        bml = "^ A ^ B ^\n| 1 | 2 |"

        assert converter.to_barelyml(converter.from_barelyml(bml)) == bml
