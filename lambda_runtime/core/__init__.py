"""
Core logic package.

Provides protocol constants, the error taxonomy and shared infrastructure.
"""
