"""
Per-session user history.

Responsibilities:
- Remember recent chat searches, newest first, without duplicates.
- Keep a list of favorite restaurants that can be toggled on and off.
"""
