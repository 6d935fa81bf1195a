"""Table Models — SQLAlchemy declarative tables for users and church members.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata
"""

from congregation.models.user import UserModel  # noqa: F401
from congregation.models.church_member import ChurchMemberModel  # noqa: F401
