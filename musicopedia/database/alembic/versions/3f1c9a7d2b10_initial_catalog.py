"""initial catalog: performers, profiles, members, subunits, memberships

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 10:12:03.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from musicopedia.common.settings import get_settings

# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = get_settings().db_schema

performer_type = postgresql.ENUM('solo', 'group', 'franchise', 'various', name='performer_type', schema=SCHEMA, create_type=False)
performer_gender = postgresql.ENUM('male', 'female', 'mixed', 'non_binary', 'unknown', name='performer_gender', schema=SCHEMA, create_type=False)
group_activity_status = postgresql.ENUM('active', 'inactive', 'disbanded', name='group_activity_status', schema=SCHEMA, create_type=False)
group_affiliation_status = postgresql.ENUM('never_in_a_group', 'in_a_group', 'was_in_a_group', name='group_affiliation_status', schema=SCHEMA, create_type=False)
membership_status = postgresql.ENUM('current', 'former', 'inactive', name='membership_status', schema=SCHEMA, create_type=False)

ENUMS = (performer_type, performer_gender, group_activity_status, group_affiliation_status, membership_status)


def _fk(table: str) -> str:
    return f"{SCHEMA}.{table}" if SCHEMA else table


def _service_object_columns() -> list:
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
        sa.Column('meta_data', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    for enum in ENUMS:
        enum.create(bind, checkfirst=True)

    op.create_table(
        'performers',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=300), nullable=False),
        sa.Column('type', performer_type, nullable=False),
        sa.Column('external_id', sa.String(length=64), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('primary_language', sa.String(length=64), nullable=True),
        sa.Column('genre', sa.String(length=128), nullable=True),
        sa.Column('origin_country', sa.String(length=64), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_performers')),
        sa.UniqueConstraint('external_id', name=op.f('uq_performers_external_id')),
        schema=SCHEMA,
    )
    op.create_index('ix_performers_name', 'performers', ['name'], unique=False, schema=SCHEMA)
    op.create_index('ix_performers_type', 'performers', ['type'], unique=False, schema=SCHEMA)

    op.create_table(
        'solo_profiles',
        sa.Column('performer_id', sa.Uuid(), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('death_date', sa.Date(), nullable=True),
        sa.Column('gender', performer_gender, nullable=True),
        sa.Column('group_affiliation_status', group_affiliation_status, nullable=True),
        sa.CheckConstraint(
            'death_date IS NULL OR birth_date IS NULL OR death_date >= birth_date',
            name=op.f('ck_solo_profiles_death_after_birth'),
        ),
        sa.ForeignKeyConstraint(
            ['performer_id'], [f"{_fk('performers')}.id"],
            name=op.f('fk_solo_profiles_performer_id_performers'), ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('performer_id', name=op.f('pk_solo_profiles')),
        schema=SCHEMA,
    )

    op.create_table(
        'group_profiles',
        sa.Column('performer_id', sa.Uuid(), nullable=False),
        sa.Column('formation_date', sa.Date(), nullable=True),
        sa.Column('disband_date', sa.Date(), nullable=True),
        sa.Column('gender', performer_gender, nullable=True),
        sa.Column('activity_status', group_activity_status, nullable=True),
        sa.CheckConstraint(
            'disband_date IS NULL OR formation_date IS NULL OR disband_date >= formation_date',
            name=op.f('ck_group_profiles_disband_after_formation'),
        ),
        sa.ForeignKeyConstraint(
            ['performer_id'], [f"{_fk('performers')}.id"],
            name=op.f('fk_group_profiles_performer_id_performers'), ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('performer_id', name=op.f('pk_group_profiles')),
        schema=SCHEMA,
    )

    op.create_table(
        'members',
        *_service_object_columns(),
        sa.Column('member_name', sa.String(length=255), nullable=False),
        sa.Column('real_name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('nationality', sa.String(length=64), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('death_date', sa.Date(), nullable=True),
        sa.Column('solo_performer_id', sa.Uuid(), nullable=True),
        sa.CheckConstraint(
            'death_date IS NULL OR birth_date IS NULL OR death_date >= birth_date',
            name=op.f('ck_members_death_after_birth'),
        ),
        sa.ForeignKeyConstraint(
            ['solo_performer_id'], [f"{_fk('performers')}.id"],
            name=op.f('fk_members_solo_performer_id_performers'), ondelete='SET NULL',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_members')),
        schema=SCHEMA,
    )
    op.create_index('ix_members_member_name', 'members', ['member_name'], unique=False, schema=SCHEMA)
    op.create_index('ix_members_solo_performer_id', 'members', ['solo_performer_id'], unique=False, schema=SCHEMA)

    op.create_table(
        'subunits',
        *_service_object_columns(),
        sa.Column('main_group_id', sa.Uuid(), nullable=False),
        sa.Column('group_identity_id', sa.Uuid(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('formation_date', sa.Date(), nullable=True),
        sa.Column('disband_date', sa.Date(), nullable=True),
        sa.Column('gender', performer_gender, nullable=True),
        sa.Column('activity_status', group_activity_status, nullable=True),
        sa.Column('origin_country', sa.String(length=64), nullable=True),
        sa.CheckConstraint(
            'disband_date IS NULL OR formation_date IS NULL OR disband_date >= formation_date',
            name=op.f('ck_subunits_disband_after_formation'),
        ),
        sa.ForeignKeyConstraint(
            ['main_group_id'], [f"{_fk('group_profiles')}.performer_id"],
            name=op.f('fk_subunits_main_group_id_group_profiles'), ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['group_identity_id'], [f"{_fk('group_profiles')}.performer_id"],
            name=op.f('fk_subunits_group_identity_id_group_profiles'), ondelete='SET NULL',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_subunits')),
        schema=SCHEMA,
    )
    op.create_index('ix_subunits_main_group_id', 'subunits', ['main_group_id'], unique=False, schema=SCHEMA)
    op.create_index('ix_subunits_name', 'subunits', ['name'], unique=False, schema=SCHEMA)

    op.create_table(
        'group_memberships',
        sa.Column('group_id', sa.Uuid(), nullable=False),
        sa.Column('member_id', sa.Uuid(), nullable=False),
        sa.Column('status', membership_status, nullable=False),
        sa.Column('join_date', sa.Date(), nullable=False),
        sa.Column('leave_date', sa.Date(), nullable=True),
        sa.ForeignKeyConstraint(
            ['group_id'], [f"{_fk('group_profiles')}.performer_id"],
            name=op.f('fk_group_memberships_group_id_group_profiles'), ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['member_id'], [f"{_fk('members')}.id"],
            name=op.f('fk_group_memberships_member_id_members'), ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('group_id', 'member_id', name=op.f('pk_group_memberships')),
        schema=SCHEMA,
    )
    op.create_index('ix_group_memberships_member_id', 'group_memberships', ['member_id'], unique=False, schema=SCHEMA)
    op.create_index('ix_group_memberships_group_status', 'group_memberships', ['group_id', 'status'], unique=False, schema=SCHEMA)

    op.create_table(
        'subunit_memberships',
        sa.Column('subunit_id', sa.Uuid(), nullable=False),
        sa.Column('member_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ['subunit_id'], [f"{_fk('subunits')}.id"],
            name=op.f('fk_subunit_memberships_subunit_id_subunits'), ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['member_id'], [f"{_fk('members')}.id"],
            name=op.f('fk_subunit_memberships_member_id_members'), ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('subunit_id', 'member_id', name=op.f('pk_subunit_memberships')),
        schema=SCHEMA,
    )
    op.create_index('ix_subunit_memberships_member_id', 'subunit_memberships', ['member_id'], unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_subunit_memberships_member_id', table_name='subunit_memberships', schema=SCHEMA)
    op.drop_table('subunit_memberships', schema=SCHEMA)
    op.drop_index('ix_group_memberships_group_status', table_name='group_memberships', schema=SCHEMA)
    op.drop_index('ix_group_memberships_member_id', table_name='group_memberships', schema=SCHEMA)
    op.drop_table('group_memberships', schema=SCHEMA)
    op.drop_index('ix_subunits_name', table_name='subunits', schema=SCHEMA)
    op.drop_index('ix_subunits_main_group_id', table_name='subunits', schema=SCHEMA)
    op.drop_table('subunits', schema=SCHEMA)
    op.drop_index('ix_members_solo_performer_id', table_name='members', schema=SCHEMA)
    op.drop_index('ix_members_member_name', table_name='members', schema=SCHEMA)
    op.drop_table('members', schema=SCHEMA)
    op.drop_table('group_profiles', schema=SCHEMA)
    op.drop_table('solo_profiles', schema=SCHEMA)
    op.drop_index('ix_performers_type', table_name='performers', schema=SCHEMA)
    op.drop_index('ix_performers_name', table_name='performers', schema=SCHEMA)
    op.drop_table('performers', schema=SCHEMA)

    bind = op.get_bind()
    for enum in reversed(ENUMS):
        enum.drop(bind, checkfirst=True)
