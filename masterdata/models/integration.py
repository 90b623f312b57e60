"""Integration model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from masterdata.models.base import Base, RecordMixin, new_record_id


class Integration(RecordMixin, Base):
    """A third-party data source users can connect (Spotify, Strava, ...).

    ``popularity`` ranks integrations in listings, highest first.
    """

    __tablename__ = "Integrations"

    integration_id: Mapped[str] = mapped_column(
        "integrationId", String(36), primary_key=True, default=new_record_id
    )
    name: Mapped[str] = mapped_column("name", String(50), nullable=False)
    label: Mapped[str | None] = mapped_column("label", String(50), nullable=True)
    popularity: Mapped[int | None] = mapped_column("popularity", Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Integration {self.name}>"
