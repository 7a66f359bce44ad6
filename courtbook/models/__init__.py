# Import all models so that SQLAlchemy registers them for metadata.create_all
from courtbook.models.user import User
from courtbook.models.audit_log import AuditLog
from courtbook.models.weekly_block import WeeklyBlock
from courtbook.models.manual_block import ManualBlock
from courtbook.models.booking import Booking
from courtbook.models.settings import AppSettings

__all__ = [
    "User",
    "AuditLog",
    "WeeklyBlock",
    "ManualBlock",
    "Booking",
    "AppSettings",
]
