"""Create veterinary clinic schema and seed roles

Revision ID: a1c4e2f9b7d3
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = 'a1c4e2f9b7d3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'usuarios',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre', sa.String(length=150), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=True),
        sa.Column('foto_perfil', sa.String(length=500), nullable=True),
        sa.Column('proveedor', sa.Enum('local', 'google', name='auth_provider'), nullable=False),
        sa.Column('creado_en', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_usuarios_id'), 'usuarios', ['id'], unique=False)
    op.create_index(op.f('ix_usuarios_email'), 'usuarios', ['email'], unique=True)

    roles = op.create_table(
        'roles',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('nombre'),
    )
    op.create_index(op.f('ix_roles_id'), 'roles', ['id'], unique=False)

    op.create_table(
        'usuarios_roles',
        sa.Column('usuario_id', sa.Integer(), nullable=False),
        sa.Column('rol_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['usuario_id'], ['usuarios.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['rol_id'], ['roles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('usuario_id', 'rol_id'),
    )

    op.create_table(
        'veterinarios',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('usuario_id', sa.Integer(), nullable=False),
        sa.Column('nombre', sa.String(length=150), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('especialidad', sa.String(length=150), nullable=True),
        sa.Column('telefono', sa.String(length=50), nullable=True),
        sa.ForeignKeyConstraint(['usuario_id'], ['usuarios.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_veterinarios_id'), 'veterinarios', ['id'], unique=False)
    op.create_index(op.f('ix_veterinarios_usuario_id'), 'veterinarios', ['usuario_id'], unique=False)

    op.create_table(
        'mascotas',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('usuario_id', sa.Integer(), nullable=False),
        sa.Column('nombre', sa.String(length=100), nullable=False),
        sa.Column('especie', sa.String(length=50), nullable=True),
        sa.Column('raza', sa.String(length=100), nullable=True),
        sa.Column('edad', sa.Integer(), nullable=True),
        sa.Column('peso', sa.Numeric(precision=6, scale=2), nullable=True),
        sa.Column('creado_en', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.ForeignKeyConstraint(['usuario_id'], ['usuarios.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_mascotas_id'), 'mascotas', ['id'], unique=False)
    op.create_index(op.f('ix_mascotas_usuario_id'), 'mascotas', ['usuario_id'], unique=False)

    op.create_table(
        'citas',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('mascota_id', sa.Integer(), nullable=False),
        sa.Column('veterinario_id', sa.Integer(), nullable=False),
        sa.Column('fecha', sa.DateTime(), nullable=False),
        sa.Column('motivo', sa.String(length=500), nullable=False),
        sa.Column('estado', sa.String(length=30), nullable=False, server_default='PENDIENTE'),
        sa.ForeignKeyConstraint(['mascota_id'], ['mascotas.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['veterinario_id'], ['veterinarios.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_citas_id'), 'citas', ['id'], unique=False)
    op.create_index(op.f('ix_citas_mascota_id'), 'citas', ['mascota_id'], unique=False)
    op.create_index(op.f('ix_citas_veterinario_id'), 'citas', ['veterinario_id'], unique=False)

    # Roles the application relies on
    op.bulk_insert(roles, [{'nombre': 'ADMIN'}, {'nombre': 'CLIENTE'}])


def downgrade() -> None:
    op.drop_table('citas')
    op.drop_table('mascotas')
    op.drop_table('veterinarios')
    op.drop_table('usuarios_roles')
    op.drop_index(op.f('ix_roles_id'), table_name='roles')
    op.drop_table('roles')
    op.drop_index(op.f('ix_usuarios_email'), table_name='usuarios')
    op.drop_index(op.f('ix_usuarios_id'), table_name='usuarios')
    op.drop_table('usuarios')
    sa.Enum(name='auth_provider').drop(op.get_bind(), checkfirst=True)
