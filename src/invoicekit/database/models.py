"""SQLAlchemy models for invoicekit database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Company(Base):
    """Issuing company model."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    street = Column(String, nullable=False, default="")
    city = Column(String, nullable=False, default="")
    state = Column(String, nullable=False, default="")
    zip_code = Column(String, nullable=False, default="")
    country = Column(String, nullable=False, default="")
    tax_id = Column(String, nullable=True)
    is_default = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    services = relationship("Service", back_populates="company", cascade="all, delete-orphan")
    invoices = relationship("Invoice", back_populates="company")


class Customer(Base):
    """Billed customer model."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    street = Column(String, nullable=False, default="")
    city = Column(String, nullable=False, default="")
    state = Column(String, nullable=False, default="")
    zip_code = Column(String, nullable=False, default="")
    country = Column(String, nullable=False, default="")
    tax_id = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    invoices = relationship("Invoice", back_populates="customer")


class Service(Base):
    """Billable service model."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=False)
    default_rate = Column(Numeric(10, 2), nullable=False)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    company = relationship("Company", back_populates="services")


class Invoice(Base):
    """Invoice model."""

    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True)
    invoice_number = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    due_date = Column(DateTime, nullable=False)
    status = Column(String, nullable=False, default="DRAFT")
    currency = Column(String, nullable=False, default="USD")
    payment_terms = Column(String, nullable=False, default="NET_30")
    notes = Column(String, nullable=True)
    terms_and_conditions = Column(String, nullable=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)

    # Relationships
    company = relationship("Company", back_populates="invoices")
    customer = relationship("Customer", back_populates="invoices")
    lines = relationship(
        "InvoiceLine",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceLine.position",
    )


class InvoiceLine(Base):
    """Invoice line item model.

    ``position`` keeps the entry order, which totals aggregation depends on.
    """

    __tablename__ = "invoice_lines"

    id = Column(Integer, primary_key=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id"), nullable=False)
    position = Column(Integer, nullable=False)
    description = Column(String, nullable=False, default="")
    quantity = Column(Numeric(12, 4), nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    tax_rate = Column(Numeric(7, 4), nullable=False, default=0)

    # Relationships
    invoice = relationship("Invoice", back_populates="lines")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
