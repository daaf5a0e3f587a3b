"""System information gathering for whereami."""

import logging
import os
import platform
import socket
from collections.abc import Callable
from typing import TypeVar

import psutil

from whereami.errors import QueryError
from whereami.models import BootTime, DiskInfo, MemoryInfo, SystemSnapshot
from whereami.release import ReleaseInfoProvider, default_release_provider

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _query(name: str, func: Callable[[], T]) -> T:
    """Run a single OS query, turning any OS-level failure into a QueryError."""
    logger.debug("Querying %s", name)
    try:
        return func()
    except (OSError, psutil.Error) as e:
        raise QueryError(name, e) from e


class SystemCollector:
    """
    Collects a SystemSnapshot using psutil and the platform module.

    Every query runs before anything is returned. The first failing query
    raises QueryError and no partial snapshot is produced.
    """

    def __init__(
        self,
        release_provider: ReleaseInfoProvider | None = None,
        disk_path: str | None = None,
    ) -> None:
        """
        Initialize the SystemCollector.

        Args:
            release_provider: Source of OS release notes. Defaults to the
                provider for the running platform.
            disk_path: Mount point whose capacity is reported. Defaults to
                the filesystem root (the system drive on Windows).
        """
        self._release_provider = release_provider or default_release_provider()
        self._disk_path = disk_path or os.path.abspath(os.sep)

    @property
    def disk_path(self) -> str:
        """Get the mount point used for disk info."""
        return self._disk_path

    def collect(self) -> SystemSnapshot:
        """Collect a snapshot of the current system state."""
        boot_time = self._boot_time()
        cpu_count = self._cpu_count()
        cpu_speed = self._cpu_speed()
        disk = self._disk_info()
        hostname = _query("hostname", socket.gethostname)
        memory = self._memory_info()
        os_release = _query("OS release", platform.release)
        os_type = _query("OS type", platform.system)
        release_notes = self._release_provider.fetch()

        return SystemSnapshot(
            architecture=platform.machine(),
            boot_time=boot_time,
            cpu_count=cpu_count,
            cpu_speed=cpu_speed,
            hostname=hostname,
            disk=disk,
            os_type=os_type,
            os_release=os_release,
            release_notes=release_notes,
            memory=memory,
        )

    def _boot_time(self) -> BootTime:
        timestamp = _query("boot time", psutil.boot_time)
        seconds, microseconds = divmod(round(timestamp * 1_000_000), 1_000_000)
        return BootTime(seconds=seconds, microseconds=microseconds)

    def _cpu_count(self) -> int:
        count = _query("CPU count", psutil.cpu_count)
        if not count:
            raise QueryError("CPU count")
        return count

    def _cpu_speed(self) -> int:
        freq = _query("CPU speed", psutil.cpu_freq)
        if freq is None:
            raise QueryError("CPU speed")
        return int(freq.current)

    def _disk_info(self) -> DiskInfo:
        usage = _query("disk info", lambda: psutil.disk_usage(self._disk_path))
        return DiskInfo(total=usage.total, free=usage.free)

    def _memory_info(self) -> MemoryInfo:
        mem = _query("memory info", psutil.virtual_memory)
        swap = _query("swap info", psutil.swap_memory)

        # Buffers and cache are only reported on Linux and the BSDs
        buffers = getattr(mem, "buffers", None)
        cache = getattr(mem, "cached", None)
        if buffers is None or cache is None:
            logger.warning("Buffer and cache counters are not reported on this platform")

        return MemoryInfo(
            total=mem.total,
            available=mem.available,
            free=mem.free,
            swap_total=swap.total,
            swap_free=swap.free,
            buffers=buffers or 0,
            cache=cache or 0,
        )


def collect_snapshot(release_provider: ReleaseInfoProvider | None = None) -> SystemSnapshot:
    """Gather every system query in one all-or-nothing step."""
    return SystemCollector(release_provider=release_provider).collect()
