"""Agent config manager API package."""
