"""
Catalog loading package.

Responsibilities:
- Read the cuisine lookup table and the restaurant table from CSV.
- Resolve cuisine ids to display names, falling back to "Other".
- Drop malformed rows so every record handed to the search engine is complete.
"""
