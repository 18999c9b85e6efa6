from collections.abc import Iterable
from dataclasses import dataclass

from app.logging.logger import Log
from app.verification.matcher import is_valid_aadhaar_format

DEMO_AADHAAR_NUMBERS = frozenset({"123456789012", "987654321098"})


@dataclass(frozen=True)
class RegistryLookup:
    success: bool
    message: str


class MockAadhaarRegistry:
    """Number-only check against a fixed set of demo Aadhaar numbers."""

    def __init__(self, numbers: Iterable[str] = DEMO_AADHAAR_NUMBERS) -> None:
        self._numbers = frozenset(numbers)

    def lookup(self, aadhaar_number: str | None) -> RegistryLookup:
        if not is_valid_aadhaar_format(aadhaar_number):
            return RegistryLookup(
                success=False,
                message="Invalid Aadhaar number format. Must be 12 digits.",
            )
        if aadhaar_number in self._numbers:
            Log.info("Aadhaar number found in registry")
            return RegistryLookup(success=True, message="Aadhaar verified successfully")
        Log.info("Aadhaar number not found in registry")
        return RegistryLookup(success=False, message="Aadhaar number not found or invalid.")
