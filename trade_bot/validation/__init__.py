from .server_link import SERVER_LINK_PATTERN, is_valid_server_link

__all__ = ["SERVER_LINK_PATTERN", "is_valid_server_link"]
