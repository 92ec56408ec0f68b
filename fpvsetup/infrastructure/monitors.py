"""Detect the physical size of a connected monitor from its EDID block.

Detection is optional: every failure is reported as a MonitorDetectionError
and `probe_monitor_dimensions` turns it into None, leaving the inputs empty.
"""

import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

from fpvsetup.domain.conversions import length_from_unit
from fpvsetup.domain.exceptions import (
    InvalidEdidError,
    MonitorDetectionError,
    MonitorNotFoundError,
    UnsupportedPlatformError,
)
from fpvsetup.domain.models.monitor import WidthAndHeight
from fpvsetup.domain.models.units import Unit
from fpvsetup.logging_config import get_logger

logger = get_logger(__name__)

EDID_HEADER = bytes([0x00, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0x00])
EDID_BLOCK_SIZE = 128
# Maximum horizontal and vertical image size, in centimeters
EDID_WIDTH_OFFSET = 0x15
EDID_HEIGHT_OFFSET = 0x16

DRM_ROOT = Path("/sys/class/drm")
DISPLAY_REGISTRY_KEY = r"SYSTEM\CurrentControlSet\Enum\DISPLAY"


def parse_edid_image_size(data: bytes) -> tuple[float, float] | None:
    """
    Read the maximum image size from an EDID base block.

    Args:
        data: Raw EDID bytes (at least the 128-byte base block).

    Returns:
        (width_cm, height_cm), or None if the monitor does not report a size
        (projectors, or an aspect ratio encoded instead of a size).

    Raises:
        InvalidEdidError: If the block is truncated or the header is wrong.
    """
    if len(data) < EDID_BLOCK_SIZE:
        raise InvalidEdidError(
            f"EDID block too short: {len(data)} bytes, expected {EDID_BLOCK_SIZE}"
        )
    if data[: len(EDID_HEADER)] != EDID_HEADER:
        raise InvalidEdidError(f"Bad EDID header: {data[:8].hex()}")

    width_cm = data[EDID_WIDTH_OFFSET]
    height_cm = data[EDID_HEIGHT_OFFSET]
    if width_cm == 0 or height_cm == 0:
        return None
    return float(width_cm), float(height_cm)


def read_sysfs_edids(drm_root: Path = DRM_ROOT) -> Iterator[bytes]:
    """Yield EDID blobs of DRM connectors, skipping unreadable ones."""
    for edid_path in sorted(drm_root.glob("*/edid")):
        try:
            data = edid_path.read_bytes()
        except OSError as e:
            logger.debug(f"Skipping {edid_path}: {e}")
            continue
        if data:  # Disconnected connectors expose an empty file
            yield data


def read_registry_edids() -> Iterator[bytes]:
    """Yield EDID blobs stored by Windows under the DISPLAY device enum key."""
    import winreg

    with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, DISPLAY_REGISTRY_KEY) as display:
        for model in _registry_subkeys(winreg, display):
            with winreg.OpenKey(display, model) as model_key:
                for instance in _registry_subkeys(winreg, model_key):
                    try:
                        with winreg.OpenKey(
                            model_key, rf"{instance}\Device Parameters"
                        ) as params:
                            data, _ = winreg.QueryValueEx(params, "EDID")
                    except OSError:
                        continue
                    yield bytes(data)


def _registry_subkeys(winreg, key) -> Iterator[str]:
    index = 0
    while True:
        try:
            yield winreg.EnumKey(key, index)
        except OSError:
            return
        index += 1


def iter_edids() -> Iterator[bytes]:
    """Yield EDID blobs for the current platform."""
    if sys.platform.startswith("linux"):
        return read_sysfs_edids()
    if sys.platform == "win32":
        return read_registry_edids()
    raise UnsupportedPlatformError(
        f"Monitor detection is not implemented on {sys.platform}"
    )


def find_any_monitor_dimensions(edids: Iterable[bytes] | None = None) -> WidthAndHeight:
    """
    Return the size of the first monitor whose EDID reports one.

    Args:
        edids: EDID blobs to inspect; defaults to the platform's monitors.

    Raises:
        MonitorNotFoundError: If no blob yields a usable size.
        UnsupportedPlatformError: If the platform cannot be probed.
    """
    if edids is None:
        edids = iter_edids()

    for data in edids:
        try:
            size = parse_edid_image_size(data)
        except InvalidEdidError as e:
            logger.debug(f"Skipping EDID: {e}")
            continue
        if size is None:
            continue
        width_cm, height_cm = size
        return WidthAndHeight(
            width=length_from_unit(width_cm, Unit.CENTIMETERS),
            height=length_from_unit(height_cm, Unit.CENTIMETERS),
        )

    raise MonitorNotFoundError("no suitable EDID found")


def probe_monitor_dimensions() -> WidthAndHeight | None:
    """Non-fatal wrapper around find_any_monitor_dimensions."""
    try:
        dimensions = find_any_monitor_dimensions()
    except (MonitorDetectionError, OSError) as e:
        logger.warning(f"Monitor size detection failed: {e}")
        return None

    logger.info(
        f"Detected monitor size: {dimensions.width * 100:.0f} x "
        f"{dimensions.height * 100:.0f} cm"
    )
    return dimensions
