"""
CitiBank to Sage Bank Manager statement converter.
"""

__version__ = "0.1.0"
