"""
Data layer for Shortlist.

Submodules:
- models: Pydantic data models for candidates, employers, exclusions and results
- loaders: JSON file loading for the command line
"""
