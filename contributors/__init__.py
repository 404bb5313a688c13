"""Contributors Sync Package: incremental commit import and contributor attribution.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
