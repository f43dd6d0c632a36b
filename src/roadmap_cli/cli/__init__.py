"""
Command-line entry points.

Components:
- commands.py: verb registry, argparse parser that raises UsageError, argument helpers
- bootstrap.py: composition root (logging, stores, GitHub client)
- task_cli.py / expense_cli.py / activity_cli.py: the three tools
"""
