"""
Terminal number guessing game with difficulty tiers, scoring and statistics
"""

__version__ = "1.0.0"
