# api/v1/schemas/rec.py
from __future__ import annotations

from core.models.profile import RecommendationBundle, UserProfile

# the form payload and the bundle are exactly the wire shapes


class RecRequest(UserProfile):
    pass


class RecResponse(RecommendationBundle):
    pass
