from typing import Any

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from company_settings.db.base_class import Base
from company_settings.models.mixins import IntegerPrimaryKeyMixin, JSONDocument, TimestampMixin


class Company(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'companies'

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    industry: Mapped[str | None] = mapped_column(String(50), nullable=True)
    founded_year: Mapped[str | None] = mapped_column(String(10), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    company_size: Mapped[str | None] = mapped_column(String(20), nullable=True)
    primary_color: Mapped[str | None] = mapped_column(String(20), nullable=True)
    secondary_color: Mapped[str | None] = mapped_column(String(20), nullable=True)
    # Inline data URL; there is no separate upload store.
    logo: Mapped[str | None] = mapped_column(Text, nullable=True)

    operations: Mapped[list['Operation']] = relationship(
        back_populates='company', cascade='all, delete-orphan', order_by='Operation.id'
    )
    settings_record: Mapped['CompanySettingsRecord | None'] = relationship(
        back_populates='company', cascade='all, delete-orphan', uselist=False
    )


class CompanySettingsRecord(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'company_settings'

    company_id: Mapped[int] = mapped_column(
        ForeignKey('companies.id', ondelete='CASCADE'), nullable=False, unique=True, index=True
    )
    document: Mapped[dict[str, Any]] = mapped_column(JSONDocument, nullable=False, default=dict)

    company: Mapped['Company'] = relationship(back_populates='settings_record')
