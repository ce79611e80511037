from sqlalchemy import Column, Integer, Text, DateTime

from bizdirectory.database import Base
from bizdirectory.models.business import utcnow


class AdminUser(Base):
    """
    Administrator account.
    Admins may edit businesses and remove document transactions.
    """
    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(Text, unique=True, nullable=False, index=True)
    password_hash = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
