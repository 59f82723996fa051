class CandidateListError(ValueError):
    """Raised when a candidate list cannot be turned into rotation rings.

    Navigation misses (unknown item, too few candidates, stale usage) are not
    errors and never raise; this covers malformed input only.
    """
