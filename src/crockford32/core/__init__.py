"""
Core alphabet tables, codec primitives, domain models and contracts.

This module contains the foundational building blocks that are independent
of any I/O (files, network, command line).
"""
