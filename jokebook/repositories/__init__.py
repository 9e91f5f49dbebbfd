"""
Persistence adapters.

These modules encapsulate how jokes are stored/retrieved (in memory today,
a SQL table pair when DATABASE_URL is configured). The store depends on the
JokeRepository interface rather than on a concrete backend.
"""
