"""
Data layer for the ranking engine.

Candidates and job postings reach the engine already materialized in
memory; this package only defines their shape.

Submodules:
- models: Pydantic data models/schemas
"""
