"""Company news board: headlines, keyword sentiment and competitor news."""

__version__ = "0.1.0"
