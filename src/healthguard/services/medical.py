"""Medical assistant tools: image scans and nearby care."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..utils.config import Settings, get_settings
from .assistant import WellnessAI, encode_image

SUPPORTED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}


class ScanMode(str, Enum):
    PRESCRIPTION = "prescription"
    XRAY = "xray"


@dataclass
class ScanResult:
    mode: ScanMode
    image_data_url: str
    analysis: str


class ImageScanner:
    """Send an uploaded prescription or X-ray to the AI for reading."""

    def __init__(self, ai: Optional[WellnessAI] = None):
        self.ai = ai or WellnessAI()

    def scan(self, data: bytes, media_type: str, mode: ScanMode = ScanMode.PRESCRIPTION) -> ScanResult:
        if not data:
            raise ValueError("Empty upload")
        if media_type not in SUPPORTED_IMAGE_TYPES:
            raise ValueError(f"Unsupported image type: {media_type}")

        image_b64 = encode_image(data)
        if mode == ScanMode.PRESCRIPTION:
            analysis = self.ai.analyze_prescription(image_b64, media_type)
        else:
            analysis = self.ai.analyze_xray(image_b64, media_type)

        return ScanResult(
            mode=mode,
            image_data_url=f"data:{media_type};base64,{image_b64}",
            analysis=analysis,
        )


class NearbyFinder:
    """Look up pharmacies, clinics and the like around the configured location."""

    def __init__(self, ai: Optional[WellnessAI] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.ai = ai or WellnessAI(self.settings)

    def find(self, query: str) -> Optional[str]:
        """Blank queries are ignored and return None."""
        if not query or not query.strip():
            return None
        if not self.settings.has_location:
            return "Location not configured."
        return self.ai.find_nearby_places(
            query,
            self.settings.default_latitude,
            self.settings.default_longitude,
        )
