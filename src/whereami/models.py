"""Data models for whereami."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class BootTime:
    """Boot timestamp split into whole seconds and microseconds."""

    seconds: int
    microseconds: int

    @property
    def total_seconds(self) -> float:
        """Combined value in seconds."""
        return self.seconds + self.microseconds / 1_000_000


@dataclass(slots=True, frozen=True)
class MemoryInfo:
    """Immutable snapshot of physical and swap memory counters (bytes)."""

    total: int
    available: int
    free: int
    swap_total: int
    swap_free: int
    buffers: int
    cache: int

    @property
    def used(self) -> int:
        """Memory in use, derived as total minus available."""
        return self.total - self.available


@dataclass(slots=True, frozen=True)
class DiskInfo:
    """Capacity of the primary disk (bytes)."""

    total: int
    free: int


@dataclass(slots=True, frozen=True)
class ReleaseInfo:
    """OS release descriptor fields. Absent fields are None."""

    id: str | None = None
    id_like: str | None = None
    pretty_name: str | None = None
    version: str | None = None
    version_id: str | None = None
    version_codename: str | None = None
    ansi_color: str | None = None
    logo: str | None = None
    cpe_name: str | None = None
    build_id: str | None = None
    variant: str | None = None
    variant_id: str | None = None
    home_url: str | None = None
    documentation_url: str | None = None
    support_url: str | None = None
    bug_report_url: str | None = None
    privacy_policy_url: str | None = None


@dataclass(slots=True, frozen=True)
class SystemSnapshot:
    """Everything a single run reports, gathered in one pass."""

    architecture: str
    boot_time: BootTime
    cpu_count: int
    cpu_speed: int  # MHz
    hostname: str
    disk: DiskInfo
    os_type: str
    os_release: str
    release_notes: ReleaseInfo | None
    memory: MemoryInfo
