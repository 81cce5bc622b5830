"""mgit - run git commands across many working copies."""

__version__ = "0.1.0"
