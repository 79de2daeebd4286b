"""
Side-by-side bilingual DOCX translation.
"""

__version__ = "0.1.0"
