class FpvSetupException(Exception):
    """
    Base exception for all fpvsetup errors.
    """


class UnknownUnitError(FpvSetupException, ValueError):
    """
    Raised when a unit tag is outside the supported unit set.
    Indicates a caller bug, not bad user input.
    """


class MonitorDetectionError(FpvSetupException):
    """
    Base exception for monitor size detection errors.
    Never fatal: callers fall back to manual input.
    """


class MonitorNotFoundError(MonitorDetectionError):
    """
    Raised when no monitor exposes a usable EDID image size.
    """


class UnsupportedPlatformError(MonitorDetectionError):
    """
    Raised when monitor detection is not implemented for the current platform.
    """


class InvalidEdidError(MonitorDetectionError):
    """
    Raised when an EDID block is truncated or has a bad header.
    """
