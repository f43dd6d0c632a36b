"""
Expense tracker.

Components:
- expense_models.py: Expense record + amount validation
- expense_store.py: JSON-file storage + add/update/delete/list/summary
"""
