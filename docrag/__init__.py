"""
docrag: retrieval-augmented generation over PDF documents.

Ingests PDFs page by page into a pgvector-backed store and answers
questions grounded in the most similar pages.
"""

__version__ = "0.1.0"
