"""
Test suite for org-gtasks.

All tests run against an in-memory Google Tasks gateway (tests/fakes.py)
and temporary org documents; no network access or Google credentials needed.
"""
