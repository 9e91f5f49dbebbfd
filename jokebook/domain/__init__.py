"""Domain rules for jokes and categories, free of storage concerns."""
