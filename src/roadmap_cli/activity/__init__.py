"""
GitHub activity feed.

Components:
- events.py: Event record + human-readable templates per event type
- github_client.py: httpx-based fetch of a user's public events
"""
