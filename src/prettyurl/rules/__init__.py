"""Rewrite rules — compiled rule table with first-match-wins resolution.

Rules are registered in priority order during setup and frozen into an
immutable table before the first request is resolved.
"""
