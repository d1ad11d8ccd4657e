"""API module for vidcat.

API layer:
- Validates query parameters, rejecting bad input with 400
- Returns payloads for the dashboard
- Forbidden: filtering or sorting logic (lives in vidcat.catalog)
"""
