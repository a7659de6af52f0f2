"""A LAN chat: a relay server and a client, each with a pygame window."""

__version__ = "0.1.0"