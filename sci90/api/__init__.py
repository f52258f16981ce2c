"""
API boundary for the SCI-90 scoring service.

Design intent:
- Expose thin, typed, stateless endpoints over the scoring engine.
- Keep request validation explicit and failure modes predictable.
"""
