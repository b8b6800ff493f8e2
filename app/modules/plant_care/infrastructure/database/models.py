# 📄 File: app/modules/plant_care/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how plants, their care tasks and the activity diary are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models implementing the plant care schema, with foreign keys that cascade task
# deletion and detach activity entries when a plant is removed.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - plant/task/activity repository implementations (CRUD operations)
# - migrations/versions/001_initial_tables.py (schema)
# - app.shared.infrastructure.database.connection.init_database (create_all)

"""
SQLAlchemy Models for Plant Care

Models:
- PlantModel: a plant and its watering schedule inputs
- TaskModel: scheduled care tasks (deleted together with their plant)
- ActivityModel: activity log (kept, with plant_id cleared, when a plant is deleted)

All timestamps are stored in UTC.
"""

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.sql import func

from app.shared.infrastructure.database.connection import Base


class PlantModel(Base):
    """SQLAlchemy model for plants."""
    __tablename__ = "plants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    species = Column(String(150), nullable=True)
    location = Column(String(150), nullable=False)
    image_url = Column(Text, nullable=True)
    watering_frequency = Column(Integer, nullable=False)  # days
    light_needs = Column(String(50), nullable=False)
    last_watered = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("watering_frequency >= 1", name="ck_plants_watering_frequency_positive"),
    )

    def __repr__(self):
        return f"<PlantModel(id={self.id}, name={self.name})>"


class TaskModel(Base):
    """SQLAlchemy model for scheduled care tasks."""
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(
        Integer,
        ForeignKey("plants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(200), nullable=False)
    type = Column(String(20), nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    completed = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<TaskModel(id={self.id}, type={self.type}, plant_id={self.plant_id})>"


class ActivityModel(Base):
    """SQLAlchemy model for activity log entries."""
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(
        Integer,
        ForeignKey("plants.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    type = Column(String(50), nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
    description = Column(Text, nullable=False)
    date = Column(String(10), nullable=False)  # ISO date of timestamp
    notes = Column(Text, nullable=True)
    # "metadata" is reserved on declarative classes
    activity_metadata = Column("metadata", JSON, nullable=True)

    def __repr__(self):
        return f"<ActivityModel(id={self.id}, type={self.type})>"
