"""ORM Models — SQLAlchemy declarative models for the three logical stores.

Invariants:
    - All models inherit from Base (db/base.py)
    - assets: identity -> record; owner_index: account -> bounded identity list;
      registry_counters: named scalars (total_created)

Design Decisions:
    - One file per store for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from asset_registry.models.asset import AssetRecord  # noqa: F401
from asset_registry.models.owner_index import OwnerIndexEntry  # noqa: F401
from asset_registry.models.counter import RegistryCounter  # noqa: F401
