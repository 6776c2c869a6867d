"""Crisis keyword screening for free-text input."""

import re
from dataclasses import dataclass
from typing import Optional

from ..utils.config import get_settings

DANGER_PATTERN = re.compile(
    r"(suicide|kill myself|end it all|hurt myself|die|give up)",
    re.IGNORECASE,
)


@dataclass
class SafetyAlert:
    """Static resource message shown instead of an AI reply."""
    title: str
    message: str
    helpline: str

    @property
    def helpline_url(self) -> str:
        return f"tel:{self.helpline}"


def needs_safety_alert(text: str) -> bool:
    """Whether the text contains any distress keyword."""
    return bool(DANGER_PATTERN.search(text))


def check_text(text: str, helpline: Optional[str] = None) -> Optional[SafetyAlert]:
    """
    Screen text before it is sent to the AI.

    Returns:
        A SafetyAlert when distress is detected, otherwise None
    """
    if not needs_safety_alert(text):
        return None
    return SafetyAlert(
        title="You are not alone.",
        message=(
            "We detected distress in your message. "
            "Please connect with a professional immediately."
        ),
        helpline=helpline or get_settings().helpline_number,
    )
