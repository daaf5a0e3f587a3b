"""OS release descriptor providers."""

import logging
import shlex
import sys
from collections.abc import Iterable, Sequence

from whereami.errors import QueryError
from whereami.models import ReleaseInfo

logger = logging.getLogger(__name__)

OS_RELEASE_PATHS: tuple[str, ...] = ("/etc/os-release", "/usr/lib/os-release")

# os-release keys mapped to ReleaseInfo fields
OS_RELEASE_KEYS: dict[str, str] = {
    "ID": "id",
    "ID_LIKE": "id_like",
    "PRETTY_NAME": "pretty_name",
    "VERSION": "version",
    "VERSION_ID": "version_id",
    "VERSION_CODENAME": "version_codename",
    "ANSI_COLOR": "ansi_color",
    "LOGO": "logo",
    "CPE_NAME": "cpe_name",
    "BUILD_ID": "build_id",
    "VARIANT": "variant",
    "VARIANT_ID": "variant_id",
    "HOME_URL": "home_url",
    "DOCUMENTATION_URL": "documentation_url",
    "SUPPORT_URL": "support_url",
    "BUG_REPORT_URL": "bug_report_url",
    "PRIVACY_POLICY_URL": "privacy_policy_url",
}


class ReleaseInfoProvider:
    """Source of OS release metadata for one platform family."""

    def fetch(self) -> ReleaseInfo | None:
        """Return the release info, or None when the platform has none."""
        raise NotImplementedError("Subclasses must implement this method")


class LinuxReleaseInfoProvider(ReleaseInfoProvider):
    """Reads /etc/os-release (or /usr/lib/os-release) on Linux systems."""

    def __init__(self, paths: Sequence[str] = OS_RELEASE_PATHS) -> None:
        """
        Initialize the LinuxReleaseInfoProvider.

        Args:
            paths: Candidate descriptor files, tried in order.
        """
        self._paths = tuple(paths)

    def fetch(self) -> ReleaseInfo | None:
        error: OSError | None = None
        for path in self._paths:
            logger.debug("Reading os-release descriptor %s", path)
            try:
                with open(path, encoding="utf-8") as f:
                    return release_info_from_mapping(parse_os_release(f))
            except OSError as e:
                error = e
        raise QueryError("release notes", error)


def parse_os_release(lines: Iterable[str]) -> dict[str, str]:
    """
    Parse os-release KEY=VALUE lines.

    Only keys present in the input are returned. Values are unquoted the way
    a shell would; lines that are blank, comments or badly quoted are skipped.
    """
    fields: dict[str, str] = {}
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        if not key.isidentifier():
            continue
        try:
            fields[key] = " ".join(shlex.split(value))
        except ValueError:
            logger.debug("Skipping malformed os-release line %r", line)
    return fields


class NoReleaseInfoProvider(ReleaseInfoProvider):
    """Fallback for platforms without an os-release descriptor."""

    def fetch(self) -> ReleaseInfo | None:
        return None


def release_info_from_mapping(fields: dict[str, str]) -> ReleaseInfo:
    """Build a ReleaseInfo from os-release key/value pairs, ignoring unknown keys."""
    values = {
        attr: fields[key] for key, attr in OS_RELEASE_KEYS.items() if key in fields
    }
    return ReleaseInfo(**values)


def default_release_provider() -> ReleaseInfoProvider:
    """Pick the release provider for the running platform."""
    if sys.platform.startswith("linux"):
        return LinuxReleaseInfoProvider()
    return NoReleaseInfoProvider()
