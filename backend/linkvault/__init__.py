"""LinkVault Application Package — link-sharing API for RVU students.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
