"""Adapters layer - Concrete implementations of ports.

- Dataset sources (CSV files, in-memory sample data)
"""
