"""create_contact_messages

Revision ID: create_contact_messages
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'create_contact_messages'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('contact_messages',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('is_anonymous', sa.Boolean(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=True),
        sa.Column('timestamp', sa.TIMESTAMP(), nullable=False),
        sa.Column('ip', sa.String(length=45), nullable=True),
        sa.Column('status', sa.Enum('new', 'read', 'replied', name='messagestatus'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_contact_messages_timestamp', 'contact_messages', ['timestamp'], unique=False)

def downgrade():
    op.drop_index('ix_contact_messages_timestamp', table_name='contact_messages')
    op.drop_table('contact_messages')
    sa.Enum(name='messagestatus').drop(op.get_bind(), checkfirst=True)
