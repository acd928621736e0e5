"""
Core numeric primitives, formatting, domain models and contracts.

This module contains the foundational building blocks that are independent
of any rendering or chart layout layer.
"""
