"""
Startup license check and file conversion services

Both are mocks today: they wait a fixed delay and report success. Screens
only talk to the LicenseChecker / FileConverter interfaces, so a real
backend can replace the mock without touching the UI.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from .constants import CONVERSION_DELAY, LICENSE_CHECK_DELAY

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("PDF", "DOCX")

STATUS_CHECKING = "Checking..."
STATUS_GRANTED = "License validated. Access granted."
STATUS_TAMPERED = "Failed: App tampering detected."
STATUS_EXPIRED = "Failed: License expired."


@dataclass(frozen=True)
class LicenseResult:
    granted: bool
    status: str
    message: str = ""


@dataclass(frozen=True)
class ConversionResult:
    success: bool
    output_format: str
    message: str


class LicenseChecker(Protocol):
    async def check_license(self) -> LicenseResult: ...


class FileConverter(Protocol):
    async def convert(self, file: str, output_format: str) -> ConversionResult: ...


def validate_file_path(path: str) -> bool:
    """Rough sanity check that a string looks like a file system path"""
    return len(path) > 5 and "/" in path


class MockLicenseChecker:
    """
    Pretends to verify the installation and license.

    Checks run in order: tampering, then expiry. Set the flags to exercise
    the failure paths.
    """

    def __init__(self, delay: float = LICENSE_CHECK_DELAY,
                 tampered: bool = False, expired: bool = False):
        self.delay = delay
        self.tampered = tampered
        self.expired = expired

    async def check_license(self) -> LicenseResult:
        await asyncio.sleep(self.delay)

        if self.tampered:
            logger.warning("License check: tampering detected")
            return LicenseResult(
                False, STATUS_TAMPERED,
                "This app installation is unauthorized.",
            )

        if self.expired:
            logger.warning("License check: license expired")
            return LicenseResult(
                False, STATUS_EXPIRED,
                "Your trial period has ended. Please purchase a license.",
            )

        logger.info("License check passed")
        return LicenseResult(True, STATUS_GRANTED)


class MockFileConverter:
    """Pretends to convert a file into PDF or DOCX"""

    def __init__(self, delay: float = CONVERSION_DELAY):
        self.delay = delay

    async def convert(self, file: str, output_format: str) -> ConversionResult:
        output_format = output_format.upper()
        if output_format not in SUPPORTED_FORMATS:
            return ConversionResult(
                False, output_format, f"Unsupported format: {output_format}"
            )
        if not validate_file_path(file):
            return ConversionResult(
                False, output_format, f"Not a valid file path: {file!r}"
            )

        await asyncio.sleep(self.delay)
        logger.info(f"Converted {file} to {output_format}")
        return ConversionResult(
            True, output_format, f"Conversion Complete! Output: {output_format} file."
        )
