"""Shared fixtures for whereami tests."""

import pytest

from whereami.models import BootTime, DiskInfo, MemoryInfo, ReleaseInfo, SystemSnapshot

GIB = 1024**3


@pytest.fixture
def memory_info() -> MemoryInfo:
    return MemoryInfo(
        total=8 * GIB,
        available=6 * GIB,
        free=4 * GIB,
        swap_total=2 * GIB,
        swap_free=1 * GIB,
        buffers=512 * 1024**2,
        cache=512 * 1024,
    )


@pytest.fixture
def disk_info() -> DiskInfo:
    return DiskInfo(total=256 * GIB, free=100 * GIB)


@pytest.fixture
def release_info() -> ReleaseInfo:
    return ReleaseInfo(
        id="ubuntu",
        id_like="debian",
        pretty_name="Ubuntu 24.04 LTS",
        version="24.04 LTS (Noble Numbat)",
        version_id="24.04",
        version_codename="noble",
        home_url="https://www.ubuntu.com/",
        bug_report_url="https://bugs.launchpad.net/ubuntu/",
    )


@pytest.fixture
def snapshot(memory_info, disk_info, release_info) -> SystemSnapshot:
    return SystemSnapshot(
        architecture="x86_64",
        boot_time=BootTime(seconds=1700000000, microseconds=250000),
        cpu_count=8,
        cpu_speed=2400,
        hostname="testhost",
        disk=disk_info,
        os_type="Linux",
        os_release="6.8.0-45-generic",
        release_notes=release_info,
        memory=memory_info,
    )
