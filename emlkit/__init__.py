"""emlkit - MIME body line breaking and EML import"""

__version__ = "0.1.0"
