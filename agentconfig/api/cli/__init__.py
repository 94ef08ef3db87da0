"""acm CLI API package - command-line interface."""

# Commands are imported lazily in main.py when needed
