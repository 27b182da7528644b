"""
Relational schema for users and their tasks.
"""
import sqlalchemy

metadata = sqlalchemy.MetaData()

USERNAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 200
PASSWORD_HASH_MAX_LENGTH = 512
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000

# Largest key an Integer column holds on every supported backend (PostgreSQL int4)
ID_MAX = 2**31 - 1


def is_storable_id(value: int) -> bool:
    return -ID_MAX - 1 <= value <= ID_MAX

users = sqlalchemy.Table(
    "Users",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True, autoincrement=True),
    sqlalchemy.Column("username", sqlalchemy.String(USERNAME_MAX_LENGTH), nullable=False, unique=True),
    sqlalchemy.Column("email", sqlalchemy.String(EMAIL_MAX_LENGTH), nullable=False, unique=True),
    sqlalchemy.Column("password_hash", sqlalchemy.String(PASSWORD_HASH_MAX_LENGTH), nullable=False),
    sqlalchemy.Column("created_at", sqlalchemy.DateTime, nullable=False),
)

tasks = sqlalchemy.Table(
    "Tasks",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True, autoincrement=True),
    sqlalchemy.Column("title", sqlalchemy.String(TITLE_MAX_LENGTH), nullable=False),
    sqlalchemy.Column("description", sqlalchemy.String(DESCRIPTION_MAX_LENGTH), nullable=True),
    sqlalchemy.Column("due_date", sqlalchemy.DateTime, nullable=True),
    sqlalchemy.Column(
        "user_id",
        sqlalchemy.Integer,
        sqlalchemy.ForeignKey("Users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
)
