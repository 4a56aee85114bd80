"""
Generation and scoring utilities for Keysmith.
"""
