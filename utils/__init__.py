"""
Text helpers shared by the parsers: label normalization, dates and domain names
"""
