"""
Scoring Context

Responsibilities:
- Computes the completion percentage shown while editing a resume

Owns: Completion checks and rounding
Never: Rejects or modifies resumes
"""

from quill.contexts.scoring.completion import CompletionCheck, score, score_breakdown

__all__ = ["score", "score_breakdown", "CompletionCheck"]
