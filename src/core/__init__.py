"""
Core business logic modules for Shortlist.

Submodules:
- matching: exclusion, elimination, category scoring and ranking
"""
