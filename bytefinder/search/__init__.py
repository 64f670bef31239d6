"""
Restaurant search engine.

Responsibilities:
- Validate a set of optional search criteria.
- Filter the in-memory restaurant catalog with every active criterion.
- Rank candidates by distance, rating and price.
- Return at most five best matches.
"""
