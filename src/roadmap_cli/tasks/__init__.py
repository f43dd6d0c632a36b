"""
Task manager.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: JSON-file storage + add/update/delete/status/list helpers
"""
