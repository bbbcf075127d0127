"""Keep a "Database changes" section and label on pull requests that add migrations."""

__version__ = "0.1.0"
