"""
High-level use cases for the Blog Manager backend.

Each service module orchestrates the BlogStore to implement the editor and
manager rules (required fields, excerpts, tags, theme activation, list
filtering). Routers should call these services instead of touching the
store directly.
"""
