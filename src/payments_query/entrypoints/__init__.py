"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- CLI: typer commands wrapping each payment query

Entrypoints translate command-line input into query service calls
and format the results as JSON.
"""
