"""
Core package for the SQL case studies browser.

Submodules provide catalog loading, filtering, document and schema parsing,
and the user interface rendering helpers orchestrated by the top-level `app.py`.
"""
