"""Agent config core - data model, settings and exceptions."""
