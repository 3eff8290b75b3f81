"""Feature modules for docucomment."""
