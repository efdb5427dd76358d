"""alienv - named alias environments for your shell."""

__version__ = "1.0.0"
