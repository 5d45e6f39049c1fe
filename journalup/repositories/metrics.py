"""Metrics store: append-only (user, type, value) rows."""

import logging
import uuid
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from journalup.core.errors import AppError, ErrorCode
from journalup.models import Metric

logger = logging.getLogger(__name__)


class MetricsRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def record(
        self,
        user_id: uuid.UUID,
        metric_type: str,
        value: int,
        notes: str | None = None,
        created_at: datetime | None = None,
    ) -> Metric:
        metric = Metric(user_id=user_id, type=metric_type, value=value, notes=notes or None)
        if created_at is not None:
            metric.created_at = created_at
        self.db.add(metric)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to record metric")
            raise AppError(500, ErrorCode.METRIC_RECORD_ERROR, "Failed to record metric", cause=e) from e
        self.db.refresh(metric)
        return metric

    def list_for_user(
        self,
        user_id: uuid.UUID,
        start: datetime | None = None,
        end: datetime | None = None,
        metric_type: str | None = None,
    ) -> list[Metric]:
        """Rows for the user within [start, end] (inclusive, either bound optional), oldest first."""
        query = self.db.query(Metric).filter(Metric.user_id == user_id)
        if metric_type is not None:
            query = query.filter(Metric.type == metric_type)
        if start is not None:
            query = query.filter(Metric.created_at >= start)
        if end is not None:
            query = query.filter(Metric.created_at <= end)
        try:
            return query.order_by(Metric.created_at).all()
        except SQLAlchemyError as e:
            logger.exception("Failed to get metrics")
            raise AppError(500, ErrorCode.METRICS_FETCH_ERROR, "Failed to get metrics", cause=e) from e
