from pydantic import BaseModel, Field

from trade_bot.validation.server_link import is_valid_server_link


class Trader(BaseModel):
    """Invoking platform user, reduced to what a notification needs"""

    mention: str = Field(..., description="Display reference that pings the user")
    avatar_url: str = Field(..., description="URL of the user's display avatar")


class TradeRequest(BaseModel):
    """A single /trade submission, alive for one invocation only"""

    trader: Trader
    item_to_trade: str = Field(..., description="The item the trader offers")
    item_looking_for: str = Field(..., description="The item the trader wants")
    private_server_link: str = Field(
        ..., description="Roblox private server share link for the trade"
    )

    def has_valid_server_link(self) -> bool:
        return is_valid_server_link(self.private_server_link)
