"""Initial master data schema

Revision ID: 20260301_000001
Revises:
Create Date: 2026-03-01

The ``updateentity`` procedure used for partial updates is provisioned
separately and is not managed here.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '20260301_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns() -> list[sa.Column]:
    """Versioning and audit columns shared by every table."""
    return [
        sa.Column('recSeq', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('recStatus', sa.Text(), nullable=False, server_default='A'),
        sa.Column('dataStatus', sa.String(length=1), nullable=False, server_default='A'),
        sa.Column('createdBy', sa.Text(), nullable=False, server_default='System'),
        sa.Column('createdOn', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('modifiedOn', sa.DateTime(timezone=True), nullable=False),
        sa.Column('modifiedBy', sa.String(length=50), nullable=True),
    ]


def upgrade() -> None:
    # === MASTER DATA (key-value configuration) ===
    op.create_table(
        'MasterData',
        sa.Column('masterDataId', sa.String(length=36), nullable=False),
        sa.Column('keyCode', sa.String(length=50), nullable=False),
        sa.Column('value', sa.String(length=50), nullable=True),
        sa.Column('parentId', sa.String(length=50), nullable=True),
        *_record_columns(),
        sa.PrimaryKeyConstraint('masterDataId', 'recSeq', name='MasterData_pkey'),
    )

    # === LISTS ===
    op.create_table(
        'Lists',
        sa.Column('listId', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        *_record_columns(),
        sa.PrimaryKeyConstraint('listId', 'recSeq', name='Lists_pkey'),
    )

    # === INTEGRATIONS ===
    op.create_table(
        'Integrations',
        sa.Column('integrationId', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('label', sa.String(length=50), nullable=True),
        sa.Column('popularity', sa.Integer(), nullable=True),
        *_record_columns(),
        sa.PrimaryKeyConstraint('integrationId', 'recSeq', name='Integrations_pkey'),
    )

    # === ITEM CATEGORIES ===
    op.create_table(
        'ItemCategories',
        sa.Column('itemCategoryId', sa.String(length=36), nullable=False),
        sa.Column('listId', sa.String(length=36), nullable=False),
        sa.Column('listRecSeq', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('name', sa.String(length=50), nullable=False),
        *_record_columns(),
        sa.PrimaryKeyConstraint('itemCategoryId', 'recSeq', name='ItemCategories_pkey'),
        sa.ForeignKeyConstraint(
            ['listId', 'listRecSeq'],
            ['Lists.listId', 'Lists.recSeq'],
            name='ItemCategories_listId_listRecSeq_fkey',
            ondelete='CASCADE',
            onupdate='CASCADE',
        ),
    )
    op.create_index('ix_ItemCategories_listId', 'ItemCategories', ['listId'])

    # === LIST INTEGRATION MAPPING ===
    op.create_table(
        'ListIntegrationMapping',
        sa.Column('listIntegrationMappingId', sa.String(length=36), nullable=False),
        sa.Column('listId', sa.String(length=36), nullable=False),
        sa.Column('listRecSeq', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('integrationId', sa.String(length=36), nullable=False),
        sa.Column('integrationRecSeq', sa.Integer(), nullable=False, server_default='0'),
        *_record_columns(),
        sa.PrimaryKeyConstraint('listIntegrationMappingId', 'recSeq', name='ListIntegrationMapping_pkey'),
        sa.ForeignKeyConstraint(
            ['listId', 'listRecSeq'],
            ['Lists.listId', 'Lists.recSeq'],
            name='ListIntegrationMapping_listId_listRecSeq_fkey',
            ondelete='CASCADE',
            onupdate='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['integrationId', 'integrationRecSeq'],
            ['Integrations.integrationId', 'Integrations.recSeq'],
            name='ListIntegrationMapping_integrationId_integrationRecSeq_fkey',
            ondelete='CASCADE',
            onupdate='CASCADE',
        ),
    )
    op.create_index('ix_ListIntegrationMapping_listId', 'ListIntegrationMapping', ['listId'])
    op.create_index('ix_ListIntegrationMapping_integrationId', 'ListIntegrationMapping', ['integrationId'])


def downgrade() -> None:
    op.drop_index('ix_ListIntegrationMapping_integrationId', table_name='ListIntegrationMapping')
    op.drop_index('ix_ListIntegrationMapping_listId', table_name='ListIntegrationMapping')
    op.drop_table('ListIntegrationMapping')
    op.drop_index('ix_ItemCategories_listId', table_name='ItemCategories')
    op.drop_table('ItemCategories')
    op.drop_table('Integrations')
    op.drop_table('Lists')
    op.drop_table('MasterData')
