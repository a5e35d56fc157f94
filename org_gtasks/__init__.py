"""
org-gtasks - pull Google Tasks into org documents and push tagged org
entries to Google Tasks.
"""

__version__ = "0.3.0"
