"""
Core numeric helpers.

Stateless pure functions over Decimal and float values. No I/O, no shared
state; every function is safe to call concurrently.
"""
