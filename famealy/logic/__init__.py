"""Core business logic layer.

Subpackages:
- ratings: meal rating aggregation (average, upsert, ordering)
- reset: once-a-day status reset
- identity: merging provider identities with cached profiles
- family: family directory (create / join / members)
- meals: the family meal board
- polling: cancellable periodic refresh for the dashboard
"""
__all__ = ["ratings", "reset", "identity", "family", "meals", "polling"]
