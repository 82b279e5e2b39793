"""
Starter workflow validator.
Checks workflow templates and their properties files before they ship.
"""

__version__ = "0.1.0"
