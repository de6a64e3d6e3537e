"""Infrastructure Layer — external collaborators and cross-cutting concerns.

Invariants:
    - Infrastructure implements the Protocols in core/boundary_protocols.py
    - All outbound HTTP calls carry a bounded timeout

Design Decisions:
    - Thin adapters over raw clients (nltk WordNet reader, httpx.AsyncClient)
"""
