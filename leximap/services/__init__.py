"""Services Layer — async orchestration around the pure lexeme core.

Invariants:
    - Services receive collaborators by constructor injection (no globals)
    - Services await IO, then hand results to pure core functions

Design Decisions:
    - One service per pipeline stage: resolver, fetcher, assembler
"""
