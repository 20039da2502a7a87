"""Bulk import pipeline for the pantry and grocery database.

Grocery types read from spreadsheets are assigned a category by the
rule-based classifier in ``pantry_ingestion.services.classification``
and upserted into the store.
"""
__version__ = "0.1.0"
