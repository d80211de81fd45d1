"""
Activities module.

Usage:
    from clubmiles.features.activities import Activity, ActivityRepository
    from clubmiles.features.activities import ManualActivityService

Models:
- Activity: Imported or manual club activity

Services:
- ManualActivityService: Admin-entered activities
"""

from .models import Activity
from .schemas import (
    ActivityResponse,
    ManualActivityCreate,
    DeleteActivityRequest,
)
from .repository import ActivityRepository, SYNC_MUTABLE_FIELDS
from .service import (
    ManualActivityService,
    ActivityError,
    ActivityNotFoundError,
    ActivityNotManualError,
)

__all__ = [
    # Models
    "Activity",
    # Schemas
    "ActivityResponse",
    "ManualActivityCreate",
    "DeleteActivityRequest",
    # Repositories
    "ActivityRepository",
    "SYNC_MUTABLE_FIELDS",
    # Services
    "ManualActivityService",
    "ActivityError",
    "ActivityNotFoundError",
    "ActivityNotManualError",
]
