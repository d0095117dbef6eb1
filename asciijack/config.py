"""
Configuration for an asciijack session.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class GameConfig:
    """
    Settings for one session, usually built from command line arguments.

    Attributes:
        asset_dir: Directory holding the thirteen card image files
        seed: Shuffle seed; None picks one from the current time
        transcript: Optional file that receives a copy of the game output
        verbose: Enables debug logging
    """

    asset_dir: Path
    seed: Optional[int] = None
    transcript: Optional[Path] = None
    verbose: bool = False

    def __post_init__(self):
        self.asset_dir = Path(self.asset_dir)
        if self.transcript is not None:
            self.transcript = Path(self.transcript)

    @classmethod
    def from_args(cls, args) -> "GameConfig":
        """Create a config from parsed command line arguments."""
        return cls(
            asset_dir=args.asset_dir,
            seed=args.seed,
            transcript=args.transcript,
            verbose=args.verbose,
        )

    def resolved_seed(self) -> int:
        """The configured seed, or the current time when none was given."""
        if self.seed is None:
            return int(time.time())
        return self.seed

    def to_dict(self) -> Dict[str, Any]:
        """Convert the config to a dictionary for logging."""
        return {
            "asset_dir": str(self.asset_dir),
            "seed": self.seed,
            "transcript": str(self.transcript) if self.transcript else None,
            "verbose": self.verbose,
        }
