from dataclasses import dataclass
from typing import Any, Dict, Optional

from trade_bot.commands.interfaces.invocation import Invocation, PlatformSession


@dataclass
class CommandContext:
    """
    Encapsulates all data and dependencies needed for command execution.

    This context object is passed to commands and contains the invocation
    being handled together with the platform session, so commands never
    reach for a global client.
    """

    # Core execution parameters
    invocation_id: str
    invocation: Invocation

    # Dependencies (injected by the platform adapter)
    session: PlatformSession
    trade_channel_id: int

    # Additional data
    metadata: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        """Validate context after initialization"""
        if not self.invocation_id:
            raise ValueError("invocation_id is required")
        if self.invocation is None:
            raise ValueError("invocation is required")
        if self.session is None:
            raise ValueError("session is required")
        if not self.trade_channel_id or self.trade_channel_id < 0:
            raise ValueError("trade_channel_id is required")

    def get_metadata(self, key: str, default: Any = None) -> Any:
        """Get metadata value with fallback"""
        if self.metadata is None:
            return default
        return self.metadata.get(key, default)

    def add_metadata(self, key: str, value: Any) -> None:
        """Add metadata key-value pair"""
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value
