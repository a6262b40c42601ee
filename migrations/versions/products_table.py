"""Alembic 마이그레이션: products 테이블 추가"""
from alembic import op
import sqlalchemy as sa


revision = "0001_products"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """상품 테이블 생성"""
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    
    op.create_index('ix_products_id', 'products', ['id'])


def downgrade():
    """테이블 삭제"""
    op.drop_index('ix_products_id', table_name='products')
    op.drop_table('products')
