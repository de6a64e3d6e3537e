"""Core Layer — pure lexeme logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the shell awaits the
      lexicon and relation service, the core shapes what they return
"""
