"""Agent config manager test package."""
