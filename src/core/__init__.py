"""
Core business logic modules for the ranking engine.

Submodules:
- matching: Skill matching (tag matching and taxonomy-weighted matching)
- scoring: Factor scorers and the composite priority score
- ranking: Pool ranking and population-level insights
"""
