"""
Core domain models, numeral algorithms, and invariants.

This module contains the building blocks of daiji conversion, independent
of any I/O except loading configuration contracts.
"""
