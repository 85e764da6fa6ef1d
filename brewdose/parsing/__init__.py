"""
Wire formats exchanged with networked dispensers.

Sub-packages:

- ``commands``: dose frame construction and parsing.
"""
