"""Reporters — Rich terminal table and JSON report."""
