"""SQLAlchemy mapper registry shared by every imperative mapping."""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

SCHEMA = "identity"

mapper_registry = registry(metadata=MetaData(schema=SCHEMA))
