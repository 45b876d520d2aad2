"""Services layer - Application orchestration.

Available services:
- NearbyCitiesService: Builds the city graph and answers nearby queries
"""

from .nearby_service import NearbyCitiesService

__all__ = ["NearbyCitiesService"]
