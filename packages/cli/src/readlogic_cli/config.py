"""
CLI Configuration
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class CLIConfig:
    """Configuration for the readlogic command"""

    # Logging
    log_level: str = "WARNING"

    # Print rule bodies one literal per line
    multiline: bool = False

    @classmethod
    def from_env(cls) -> 'CLIConfig':
        """Build the configuration from the environment (and a .env file, if any)"""
        load_dotenv()
        return cls(
            log_level=os.environ.get("READLOGIC_LOG_LEVEL", cls.log_level).upper(),
            multiline=os.environ.get("READLOGIC_MULTILINE", "").strip().lower() in _TRUE_VALUES,
        )
