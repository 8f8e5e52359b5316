"""Test suite for the Lawdesk permission and accounting core.

Test structure:
- unit/: Unit tests - domain codecs, services and handlers in isolation

Run with ``pytest -m unit``.
"""
