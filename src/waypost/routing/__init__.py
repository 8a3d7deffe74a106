"""Routing — server route registry and route parameter conventions.

Routes are registered during setup and exposed as a read-only snapshot
that the view aggregator consumes once per document.
"""
