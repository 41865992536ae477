"""
Core building blocks for whoisparser: data model, errors, logging and configuration
"""

__version__ = "0.1.0"
