"""World record history for speedrun.com leaderboards."""

__version__ = "1.0.0"
