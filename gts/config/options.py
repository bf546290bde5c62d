from dataclasses import dataclass
from typing import Optional


@dataclass
class SpeechOptions:
    """Run-time settings chosen on the command line for one speaking session."""

    quiet: bool = False
    skip_imports: bool = False
    command: str = "say"
    voice: Optional[str] = None
    rate: Optional[int] = None
    verbose: bool = False
