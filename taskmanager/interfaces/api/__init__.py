"""Interfaces HTTP."""
