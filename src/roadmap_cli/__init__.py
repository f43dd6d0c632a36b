"""roadmap-cli: task tracker, expense tracker and GitHub activity viewer."""

__version__ = "0.1.0"
