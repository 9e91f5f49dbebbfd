"""Jokebook: a small HTTP service serving jokes grouped by category."""
