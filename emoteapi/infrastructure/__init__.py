"""
Infrastructure adapters. Model-backed adapters import heavy libraries,
so import them from their modules directly.
"""
