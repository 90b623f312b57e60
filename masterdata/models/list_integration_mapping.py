"""Mapping between lists and the integrations that feed them."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from masterdata.models.base import DEFAULT_REC_SEQ, Base, RecordMixin, new_record_id


class ListIntegrationMapping(RecordMixin, Base):
    """Pairs a list with an integration; each pair is unique among active records."""

    __tablename__ = "ListIntegrationMapping"

    list_integration_mapping_id: Mapped[str] = mapped_column(
        "listIntegrationMappingId", String(36), primary_key=True, default=new_record_id
    )
    list_id: Mapped[str] = mapped_column("listId", String(36), nullable=False, index=True)
    list_rec_seq: Mapped[int] = mapped_column(
        "listRecSeq", Integer, nullable=False, default=DEFAULT_REC_SEQ
    )
    integration_id: Mapped[str] = mapped_column(
        "integrationId", String(36), nullable=False, index=True
    )
    integration_rec_seq: Mapped[int] = mapped_column(
        "integrationRecSeq", Integer, nullable=False, default=DEFAULT_REC_SEQ
    )

    def __repr__(self) -> str:
        return f"<ListIntegrationMapping list={self.list_id} integration={self.integration_id}>"
