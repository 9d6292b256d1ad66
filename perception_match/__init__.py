"""
Perception Match - scoring core for "Knowing You, Knowing Me"

Two participants (roles A and B) rate themselves and each other on a set of
traits. This package turns those ratings into per-question perception gaps,
an aggregate match percentage and ranked insight lists.

Key Design Decisions:
- The scoring engine is pure: callers pass a consistent snapshot of
  questions and ratings, the engine never reads from a store
- Missing ratings resolve to 0 (unanswered and lowest value look the same)
- Rankings are stable, so tied questions keep their session order
"""

__version__ = "1.0.0"
