from typing import Any

from sqlalchemy import Boolean, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from company_settings.db.base_class import Base
from company_settings.models.mixins import IntegerPrimaryKeyMixin, JSONDocument, TimestampMixin


class Operation(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'operations'
    __table_args__ = (
        UniqueConstraint('company_id', 'type', name='uq_operations_company_type'),
    )

    company_id: Mapped[int] = mapped_column(
        ForeignKey('companies.id', ondelete='CASCADE'), nullable=False, index=True
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default='')
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    config: Mapped[dict[str, Any]] = mapped_column(JSONDocument, nullable=False, default=dict)

    company: Mapped['Company'] = relationship(back_populates='operations')
    actions: Mapped[list['Action']] = relationship(
        back_populates='operation', cascade='all, delete-orphan', order_by='Action.id'
    )


class Action(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'actions'
    __table_args__ = (
        UniqueConstraint('operation_id', 'type', name='uq_actions_operation_type'),
    )

    operation_id: Mapped[int] = mapped_column(
        ForeignKey('operations.id', ondelete='CASCADE'), nullable=False, index=True
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default='')
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    config: Mapped[dict[str, Any]] = mapped_column(JSONDocument, nullable=False, default=dict)

    operation: Mapped['Operation'] = relationship(back_populates='actions')
