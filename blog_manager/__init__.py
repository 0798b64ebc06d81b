"""Blog Manager backend: local persistence for posts, categories and themes."""
