"""create comprador_vendedor

Revision ID: 4f1b9c2d7e10
Revises:
Create Date: 2026-10-17 00:00:00.000000
"""
import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = '4f1b9c2d7e10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'comprador_vendedor',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=254), nullable=False),
        sa.Column('cell_phone', sa.String(length=11), nullable=False),
        sa.Column('telephone', sa.String(length=10), nullable=False),
        sa.Column('cpf', sa.String(length=11), nullable=False),
        sa.Column('cnpj', sa.String(length=14), nullable=False),
        sa.Column('cep', sa.String(length=8), nullable=False),
        sa.Column('state', sa.String(length=2), nullable=False),
        sa.Column('city', sa.String(length=255), nullable=False),
        sa.Column('public_place', sa.String(length=255), nullable=False),
        sa.Column('neighborhood', sa.String(length=255), nullable=False),
        sa.Column('number', sa.String(length=20), nullable=False),
        sa.Column('complement', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_comprador_vendedor')),
    )
    with op.batch_alter_table('comprador_vendedor', schema=None) as batch_op:
        batch_op.create_index('ix_comprador_vendedor_cpf', ['cpf'], unique=False)
        batch_op.create_index('ix_comprador_vendedor_cnpj', ['cnpj'], unique=False)


def downgrade():
    with op.batch_alter_table('comprador_vendedor', schema=None) as batch_op:
        batch_op.drop_index('ix_comprador_vendedor_cnpj')
        batch_op.drop_index('ix_comprador_vendedor_cpf')

    op.drop_table('comprador_vendedor')
