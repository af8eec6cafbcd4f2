"""Shipped lexicon tables, one module per language.

Each module exposes ``ENTRIES``: a mapping from semantic key to a
pipe-delimited list of surface forms. The first form is the canonical
display form; the rest are parse-time synonyms. Keys missing from a table
resolve through the default (English) table.
"""
