"""shortcutd — keyword shortcuts for your address bar."""

__version__ = "0.1.0"
