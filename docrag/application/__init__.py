"""
Application layer.

Services orchestrating ingestion, search and grounded chat, plus
transcript export.
"""
