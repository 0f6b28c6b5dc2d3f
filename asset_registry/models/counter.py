"""RegistryCounter ORM — named scalar values.

Invariants:
    - total_created: assets ever created (u32, never decreases)
    - last_block: highest block number any committed batch was written in;
      a restarted runtime resumes strictly after it
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from asset_registry.db.base import Base


TOTAL_CREATED_KEY: str = "total_created"
LAST_BLOCK_KEY: str = "last_block"


class RegistryCounter(Base):
    """Scalar row — name -> value."""
    __tablename__ = "registry_counters"

    name: Mapped[str] = mapped_column(String(32), primary_key=True)
    value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
