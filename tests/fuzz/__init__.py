"""Intensive property tests, excluded from normal runs.

Run with: pytest -m fuzz

Python 3.13+.
"""
