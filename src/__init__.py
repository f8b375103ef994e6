"""ATS Candidate Ranking Engine."""

__app_name__ = "ats-ranking-engine"
__version__ = "0.1.0"
