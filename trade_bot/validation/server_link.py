import re
from typing import Optional

# Matches a Roblox private server share link. The search is not
# anchored: any string containing a match is accepted, including text before
# or after the link.
SERVER_LINK_PATTERN = re.compile(
    r"https:\/\/www\.roblox\.com\/share\?code=[^&]+&type=Server"
)


def is_valid_server_link(link: Optional[str]) -> bool:
    """Return True if the link contains a private server share link."""
    if not link:
        return False
    return SERVER_LINK_PATTERN.search(link) is not None
