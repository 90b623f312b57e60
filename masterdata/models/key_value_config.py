"""Key-value configuration entries (the ``MasterData`` table)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from masterdata.models.base import Base, RecordMixin, new_record_id


class KeyValueConfig(RecordMixin, Base):
    """A configuration entry identified by ``keyCode``.

    ``parentId`` groups entries hierarchically. Two active entries may not
    share the same ``(keyCode, value)`` pair.
    """

    __tablename__ = "MasterData"

    master_data_id: Mapped[str] = mapped_column(
        "masterDataId", String(36), primary_key=True, default=new_record_id
    )
    key_code: Mapped[str] = mapped_column("keyCode", String(50), nullable=False)
    value: Mapped[str | None] = mapped_column("value", String(50), nullable=True)
    parent_id: Mapped[str | None] = mapped_column("parentId", String(50), nullable=True)

    def __repr__(self) -> str:
        return f"<KeyValueConfig {self.key_code}={self.value}>"
