"""
Persistence adapters.

The key-value backends (memory, JSON file, SQL) only know how to get/set
text values under string keys. BlogStore sits on top of any of them and
owns the collections and their invariants; services should depend on
BlogStore rather than touching a backend directly.
"""
