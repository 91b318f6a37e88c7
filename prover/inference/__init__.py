from .resolve import resolve_on, resolvents
from .subsume import clause_subsumes, is_subsumed_by, subsumption

__all__ = [
    "resolve_on", "resolvents",
    "clause_subsumes", "is_subsumed_by", "subsumption",
]
