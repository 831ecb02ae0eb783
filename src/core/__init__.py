"""
Core fixed-point arithmetic, difference values, and payload contracts.

This module contains the foundational building blocks that are independent
of external systems (APIs, wallets, UI widgets, etc.).
"""
