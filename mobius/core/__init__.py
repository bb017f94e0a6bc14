"""
Core domain models, mathematical primitives, and wire contracts.

This module contains the foundational building blocks of the Möbius engine
that are independent of the command layer and any frontend.
"""
