"""
High-level use cases for the Jokebook API.

Each service module orchestrates repositories to implement the store rules
(pick a random joke, append, count, search). Routers call these services
instead of touching a storage backend directly.
"""
