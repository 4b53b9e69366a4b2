"""Retrospective board exporter.

Extracts a board (title, columns, voted messages) from a rendered page and
serializes it to plain text or CSV. Extraction works on static DOM snapshots;
page providers in retro_export.driver obtain them.
"""
