"""src/urlicious/version.py

Version information for Urlicious.
"""

__version__ = "0.2.0"
