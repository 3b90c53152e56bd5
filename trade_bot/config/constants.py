# Constants
DEFAULT_TRADE_CHANNEL_ID = 1419373453626183760
DEFAULT_PORT = 3000

TRADE_COMMAND_NAME = "trade"
TRADE_COMMAND_DESCRIPTION = "Sends a trade request to the designated channel."

# Slash command option names and descriptions, in registration order
TRADE_COMMAND_OPTIONS = {
    "item_to_trade": "The item you want to trade.",
    "item_looking_for": "The item you are looking for.",
    "private_server_link": "The private server link for the trade.",
}

PRESENCE_ACTIVITY_NAME = "/trade"

# Embed decoration
TRADE_EMBED_COLOR = 0xFFD700
TRADE_EMBED_TITLE = "✨ New Trade Request ✨"
TRADE_EMBED_DESCRIPTION = "A user has submitted a trade request."
TRADE_EMBED_FOOTER = "Trade Bot | Use the /trade command to create your own request!"
SERVER_LINK_LABEL = "Click to Join"

# Terminal replies sent back to the invoker
CHANNEL_NOT_FOUND_MESSAGE = (
    "Error: The trade channel could not be found. Please check the channel ID."
)
INVALID_LINK_MESSAGE = (
    "Error: Invalid private server link format. It must be in the format "
    "`https://www.roblox.com/share?code=________________________&type=Server`."
)
DISPATCH_FAILED_MESSAGE = "An error occurred while sending your trade request."
UNEXPECTED_ERROR_MESSAGE = DISPATCH_FAILED_MESSAGE
TRADE_SENT_MESSAGE = (
    "✅ Your trade request has been successfully sent to the trade channel!"
)

HEALTHY_TEXT = "Bot is running and healthy!"
