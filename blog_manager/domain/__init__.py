"""
Domain records (posts, categories, themes), seed data and markup rendering.

Nothing in here touches storage; repositories convert records to and from
the stored camelCase dictionaries.
"""
