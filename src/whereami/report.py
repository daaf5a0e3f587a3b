"""Text rendering of system snapshots."""

from rich.color import ColorSystem
from rich.style import Style

from whereami.config import PROGRAM_NAME
from whereami.models import DiskInfo, MemoryInfo, ReleaseInfo, SystemSnapshot
from whereami.units import format_boot_time, format_data_unit

ANSI_SWATCH = "\x1b[{code}m███████\x1b[0m"

NO_RELEASE_NOTES = "Release notes:\t\t\tNo notes\n"

URL_STYLE = "italic blue"

# (label, ReleaseInfo attribute). A None attribute is a sub-header that is
# always printed with an empty value.
RELEASE_FIELDS: tuple[tuple[str, str | None], ...] = (
    ("Distribution:", None),
    ("\tID:\t", "id"),
    ("\tID type:", "id_like"),
    ("\tName:\t", "pretty_name"),
    ("\tVersion:", "version"),
    ("\tVersion ID:", "version_id"),
    ("\tVersion Code:", "version_codename"),
    ("\tANSI color:", "ansi_color"),
    ("\tLogo:\t", "logo"),
    ("\tCPE name:", "cpe_name"),
    ("\tBuild ID:", "build_id"),
    ("\tVariant:", "variant"),
    ("\tVariant ID:", "variant_id"),
    ("URL:", None),
    ("\tHome:\t", "home_url"),
    ("\tDocumentation:", "documentation_url"),
    ("\tSupport:", "support_url"),
    ("\tBug report:", "bug_report_url"),
    ("\tPrivacy policy:", "privacy_policy_url"),
)

URL_FIELDS = frozenset(
    {"home_url", "documentation_url", "support_url", "bug_report_url", "privacy_policy_url"}
)

FULL_REPORT_TEMPLATE = (
    "Architecture:\t\t\t{architecture}\n"
    "Boot time:\t\t\t{boot_time}\n"
    "CPU count:\t\t\t{cpu_count}\n"
    "CPU speed:\t\t\t{cpu_speed} MHz\n"
    "Host:\t\t\t\t{hostname}\n"
    "{disk}"
    "OS type:\t\t\t{os_type}\n"
    "Release version:\t\t{os_release}\n"
    "{release_notes}"
    "{memory}"
)

DISK_TEMPLATE = "Disk info:\n\tTotal:\t\t\t{total}\n\tFree:\t\t\t{free}\n"

MEMORY_TEMPLATE = (
    "Memory info:\n"
    "\tMemory:\n"
    "\t\tTotal:\t\t{total}\n"
    "\t\tUsed:\t\t{used}\n"
    "\t\tAvailable:\t{available}\n"
    "\t\tFree:\t\t{free}\n"
    "\tSwap:\n"
    "\t\tTotal swap:\t{swap_total}\n"
    "\t\tFree swap:\t{swap_free}\n"
    "\n"
    "\tBuffer:\t\t\t{buffers}\n"
    "\tCache:\t\t\t{cache}"
)

HELP_TEMPLATE = (
    "{usage}\n"
    f"\t{PROGRAM_NAME} [options]\n\n"
    "Simple program to get quick info on the current machine\n\n"
    "{options}\n"
    "\t-d,\t--disk\t\t\tget hard-disk information\n"
    "\t-r,\t--release-notes\t\tget the OS release notes\n"
    "\t-m,\t--memory\t\tget ram and swap memory information\n"
    "\t-h,\t--help\t\t\tdisplay this help\n\n"
    "{memory_heading}:\n"
    "\tTotal\t\t\t\tThe total size of RAM\n"
    "\tUsed\t\t\t\tThe total RAM in use\n"
    "\tAvailable\t\t\tThe total available memory\n"
    "\tFree\t\t\t\tThe total free memory\n"
    "\tTotal swap\t\t\tThe total swap memory\n"
    "\tFree swap\t\t\tThe total unused swap memory\n"
    "\tBuffer\t\t\t\tThe total buffer memory\n"
    "\tCache\t\t\t\tThe total cache memory\n\n"
    "{disk_heading}:\n"
    "\tTotal\t\t\t\tThe total size of the disk\n"
    "\tFree\t\t\t\tTotal available disk space\n"
)

INVALID_OPTION_TEMPLATE = (
    "Invalid option '{option}'\n"
    f"running '{PROGRAM_NAME} --help' for more information\n\n"
)


def format_size(size: int) -> str:
    """Format a byte count in the host's kilobyte units."""
    return format_data_unit(size // 1024)


class Painter:
    """Applies rich styles to text fragments as ANSI escapes."""

    def __init__(self, color: bool = True) -> None:
        self._color_system = ColorSystem.STANDARD if color else None

    @property
    def color(self) -> bool:
        """Whether styles are applied."""
        return self._color_system is not None

    def paint(self, text: str, style: str) -> str:
        """Return text wrapped in the escapes for style, or unchanged when color is off."""
        return Style.parse(style).render(text, color_system=self._color_system)


class ReportRenderer:
    """Renders the report blocks from gathered system information."""

    def __init__(self, painter: Painter | None = None) -> None:
        self._painter = painter or Painter()
        self._help = HELP_TEMPLATE.format(
            usage=self._painter.paint("Usage", "bold green"),
            options=self._painter.paint("Options", "bold green"),
            memory_heading=self._painter.paint("AVAILABLE INFO IN MEMORY INFO", "bold underline"),
            disk_heading=self._painter.paint("AVAILABLE INFO IN DISK INFO", "bold underline"),
        )

    def render_full(self, snapshot: SystemSnapshot) -> str:
        """Render the complete report, without its final newline."""
        return FULL_REPORT_TEMPLATE.format(
            architecture=self._painter.paint(snapshot.architecture, "bright_yellow"),
            boot_time=format_boot_time(snapshot.boot_time),
            cpu_count=snapshot.cpu_count,
            cpu_speed=snapshot.cpu_speed,
            hostname=self._painter.paint(snapshot.hostname, "bright_white"),
            disk=self.render_disk(snapshot.disk),
            os_type=snapshot.os_type,
            os_release=snapshot.os_release,
            release_notes=self.render_release_notes(snapshot.release_notes),
            memory=self.render_memory(snapshot.memory),
        )

    def render_disk(self, disk: DiskInfo) -> str:
        """Render the disk info block."""
        return DISK_TEMPLATE.format(total=format_size(disk.total), free=format_size(disk.free))

    def render_memory(self, memory: MemoryInfo) -> str:
        """Render the memory info block, without a trailing newline."""
        return MEMORY_TEMPLATE.format(
            total=format_size(memory.total),
            used=format_size(memory.used),
            available=format_size(memory.available),
            free=format_size(memory.free),
            swap_total=format_size(memory.swap_total),
            swap_free=format_size(memory.swap_free),
            buffers=format_size(memory.buffers),
            cache=format_size(memory.cache),
        )

    def render_release_notes(self, release: ReleaseInfo | None) -> str:
        """
        Render the release notes block.

        Absent fields produce no line at all. None means the platform has no
        release descriptor and renders a single "No notes" line.
        """
        if release is None:
            return NO_RELEASE_NOTES

        lines = ["Release notes:\n"]
        for label, attr in RELEASE_FIELDS:
            if attr is None:
                value = ""
            else:
                value = getattr(release, attr)
                if value is None:
                    continue
                if attr == "ansi_color":
                    value = ANSI_SWATCH.format(code=value)
                elif attr in URL_FIELDS:
                    value = self._painter.paint(value, URL_STYLE)
            lines.append(f"\t{label}\t{value}\n")
        return "".join(lines)

    def render_help(self) -> str:
        """Render the help text."""
        return self._help

    def render_invalid_option(self, option: str) -> str:
        """Render the message for an unrecognized option, followed by the help text."""
        return INVALID_OPTION_TEMPLATE.format(option=option) + self.render_help()

    def render_error(self, error: BaseException) -> str:
        """Render a failed query as a highlighted message."""
        return self._painter.paint(f"\n\n\n{error}", "bold red")
