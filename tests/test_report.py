"""Tests for report rendering."""

import pytest

from whereami.errors import QueryError
from whereami.models import ReleaseInfo
from whereami.report import NO_RELEASE_NOTES, Painter, ReportRenderer, format_size


@pytest.fixture
def renderer() -> ReportRenderer:
    return ReportRenderer(Painter(color=False))


@pytest.fixture
def color_renderer() -> ReportRenderer:
    return ReportRenderer(Painter(color=True))


def test_format_size_uses_kilobytes():
    """Test byte counts are scaled to KB before formatting."""
    assert format_size(512 * 1024) == "512\tKB"
    assert format_size(1024 * 1024) == "1.00\tMB"


class TestPainter:
    """Tests for Painter."""

    def test_color_off_returns_text_unchanged(self):
        """Test no escapes are added when color is disabled."""
        painter = Painter(color=False)
        assert not painter.color
        assert painter.paint("hello", "bold red") == "hello"

    def test_color_on_wraps_in_ansi(self):
        """Test styles render as standard ANSI escapes."""
        painter = Painter(color=True)
        assert painter.color
        assert painter.paint("hello", "bold red") == "\x1b[1;31mhello\x1b[0m"
        assert painter.paint("x86_64", "bright_yellow") == "\x1b[93mx86_64\x1b[0m"


class TestBlocks:
    """Tests for the individual report blocks."""

    def test_render_disk(self, renderer, disk_info):
        """Test the disk block layout."""
        assert renderer.render_disk(disk_info) == (
            "Disk info:\n\tTotal:\t\t\t256.00\tGB\n\tFree:\t\t\t100.00\tGB\n"
        )

    def test_render_memory(self, renderer, memory_info):
        """Test the memory block layout, with no trailing newline."""
        assert renderer.render_memory(memory_info) == (
            "Memory info:\n"
            "\tMemory:\n"
            "\t\tTotal:\t\t8.00\tGB\n"
            "\t\tUsed:\t\t2.00\tGB\n"
            "\t\tAvailable:\t6.00\tGB\n"
            "\t\tFree:\t\t4.00\tGB\n"
            "\tSwap:\n"
            "\t\tTotal swap:\t2.00\tGB\n"
            "\t\tFree swap:\t1.00\tGB\n"
            "\n"
            "\tBuffer:\t\t\t512.00\tMB\n"
            "\tCache:\t\t\t512\tKB"
        )

    def test_render_release_notes_skips_absent_fields(self, renderer):
        """Test only present fields and the two sub-headers are printed."""
        release = ReleaseInfo(id="ubuntu", home_url="https://www.ubuntu.com/")

        assert renderer.render_release_notes(release) == (
            "Release notes:\n"
            "\tDistribution:\t\n"
            "\t\tID:\t\tubuntu\n"
            "\tURL:\t\n"
            "\t\tHome:\t\thttps://www.ubuntu.com/\n"
        )

    def test_render_release_notes_empty_descriptor(self, renderer):
        """Test an empty descriptor still prints the headers."""
        assert renderer.render_release_notes(ReleaseInfo()) == (
            "Release notes:\n\tDistribution:\t\n\tURL:\t\n"
        )

    def test_release_notes_field_order(self, renderer, release_info):
        """Test fields follow the fixed order."""
        output = renderer.render_release_notes(release_info)
        labels = ["Distribution:", "ID:", "ID type:", "Name:", "Version:", "Version ID:",
                  "Version Code:", "URL:", "Home:", "Bug report:"]
        positions = [output.index(f"\t{label}") for label in labels]
        assert positions == sorted(positions)

    def test_ansi_color_swatch(self, renderer):
        """Test the ANSI color field renders as a color swatch."""
        output = renderer.render_release_notes(ReleaseInfo(ansi_color="0;38;2;233;84;32"))
        assert "\t\tANSI color:\t\x1b[0;38;2;233;84;32m███████\x1b[0m\n" in output

    def test_urls_are_highlighted(self, color_renderer):
        """Test URL fields are printed in blue italics."""
        output = color_renderer.render_release_notes(
            ReleaseInfo(support_url="https://help.ubuntu.com/")
        )
        assert "\t\tSupport:\t\x1b[3;34mhttps://help.ubuntu.com/\x1b[0m\n" in output

    def test_no_release_notes(self, renderer):
        """
        Test platforms without release info get a single line.

        The trailing newline is intentional: it keeps the memory block that
        follows in the full report on its own line.
        """
        assert renderer.render_release_notes(None) == NO_RELEASE_NOTES
        assert NO_RELEASE_NOTES == "Release notes:\t\t\tNo notes\n"


class TestFullReport:
    """Tests for the complete report."""

    def test_report_sections_in_order(self, renderer, snapshot):
        """Test the report lists each section in the fixed order."""
        output = renderer.render_full(snapshot)
        markers = [
            "Architecture:\t\t\tx86_64\n",
            "Boot time:\t\t\t1700000000.250000 seconds\n",
            "CPU count:\t\t\t8\n",
            "CPU speed:\t\t\t2400 MHz\n",
            "Host:\t\t\t\ttesthost\n",
            "Disk info:\n",
            "OS type:\t\t\tLinux\n",
            "Release version:\t\t6.8.0-45-generic\n",
            "Release notes:\n",
            "Memory info:\n",
        ]
        positions = [output.index(marker) for marker in markers]
        assert positions == sorted(positions)
        assert output.startswith("Architecture:")
        assert output.endswith("\tCache:\t\t\t512\tKB")

    def test_report_highlights_architecture_and_host(self, color_renderer, snapshot):
        """Test architecture and hostname are highlighted."""
        output = color_renderer.render_full(snapshot)
        assert "Architecture:\t\t\t\x1b[93mx86_64\x1b[0m\n" in output
        assert "Host:\t\t\t\t\x1b[97mtesthost\x1b[0m\n" in output


class TestHelp:
    """Tests for help and error messages."""

    def test_help_text(self, renderer):
        """Test the help text lists every option and both glossaries."""
        help_text = renderer.render_help()

        assert help_text.startswith("Usage\n\twhereami [options]\n\n")
        for flag in ("--disk", "--release-notes", "--memory", "--help"):
            assert flag in help_text
        assert "AVAILABLE INFO IN MEMORY INFO:\n" in help_text
        assert help_text.endswith(
            "AVAILABLE INFO IN DISK INFO:\n"
            "\tTotal\t\t\t\tThe total size of the disk\n"
            "\tFree\t\t\t\tTotal available disk space\n"
        )

    def test_help_is_constant(self, renderer):
        """Test the help text is the same on every call and renderer."""
        first = renderer.render_help()
        assert renderer.render_help() == first
        assert renderer.render_help() is first
        assert ReportRenderer(Painter(color=False)).render_help() == first

    def test_help_headings_highlighted(self, color_renderer):
        """Test help headings are styled when color is on."""
        help_text = color_renderer.render_help()
        assert help_text.startswith("\x1b[1;32mUsage\x1b[0m\n")
        assert "\x1b[1;4mAVAILABLE INFO IN DISK INFO\x1b[0m:\n" in help_text

    def test_invalid_option(self, renderer):
        """Test the invalid option message is followed by the help text."""
        output = renderer.render_invalid_option("--bogus")

        assert output.startswith(
            "Invalid option '--bogus'\nrunning 'whereami --help' for more information\n\n"
        )
        assert output.endswith(renderer.render_help())

    def test_render_error(self, renderer, color_renderer):
        """Test query failures render after three blank lines, in bold red when colored."""
        error = QueryError("disk info", OSError("boom"))

        assert renderer.render_error(error) == "\n\n\nFailed to query disk info: boom"
        assert color_renderer.render_error(error) == (
            "\x1b[1;31m\n\n\nFailed to query disk info: boom\x1b[0m"
        )
