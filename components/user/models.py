"""User model for the database."""

import enum

from sqlalchemy import Column, Enum, Integer, Numeric, String
from sqlalchemy.orm import relationship

from components.core.database import Base

DEFAULT_BALANCE = 100000


class UserRole(str, enum.Enum):
    CUSTOMER = "Customer"
    MANAGER = "manager"
    ADMIN = "admin"


class User(Base):
    """User model representing a bank customer."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # Hashed password
    balance = Column(Numeric(15, 2), nullable=False, default=DEFAULT_BALANCE)
    phone = Column(String(20))
    role = Column(
        Enum(
            UserRole,
            name="user_role",
            values_callable=lambda roles: [role.value for role in roles],
        ),
        nullable=False,
        default=UserRole.CUSTOMER,
    )

    # Ledger rows go with the user through ON DELETE CASCADE
    tokens = relationship(
        "UserToken",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
