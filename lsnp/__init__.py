"""Local Social Networking Protocol: profile, post and direct messages over UDP."""

__version__ = "0.1.0"
__all__ = ["cli", "client", "dm", "net", "parse", "profile", "server"]