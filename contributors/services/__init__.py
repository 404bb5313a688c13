"""Services Layer: the four sync steps, the orchestrator, and read-only queries.

Invariants:
    - Steps never commit; the orchestrator owns the one transaction of a run
    - Steps talk to each other only through return values (core/sync_results.py,
      core/contributions.py)

Design Decisions:
    - One file per step for locality, mirroring the order they run in
"""
