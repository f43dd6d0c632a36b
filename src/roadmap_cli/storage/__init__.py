"""
Record storage.

Components:
- json_store.py: generic JSON-array record store, document I/O boundary, id assignment
"""
