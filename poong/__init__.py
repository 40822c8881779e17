"""
Poong: a two-paddle ball game with a fixed-tick simulation engine
"""

__version__ = "0.1.0"
