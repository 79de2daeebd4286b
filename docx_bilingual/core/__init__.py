"""
Core translation modules

Note: the pipeline is not re-exported here to keep the import order
exceptions → language → config → translation → docx → pipeline acyclic.
Import it directly:

    from docx_bilingual.core.pipeline import translate_document
"""

__all__ = []
