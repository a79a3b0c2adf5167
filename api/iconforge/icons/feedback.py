from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Protocol

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FeedbackEntry:
    feedback_id: str
    prompt_id: str | None
    config_name: str | None
    rating: Any
    comments: Any
    generated_icon_url: Any = None
    received_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class FeedbackSink(Protocol):
    def record(self, entry: FeedbackEntry) -> None: ...


class LoggingFeedbackSink:
    """Feedback is only logged; nothing is persisted."""

    def record(self, entry: FeedbackEntry) -> None:
        logger.info(
            "prompt_feedback_received",
            feedback_id=entry.feedback_id,
            prompt_id=entry.prompt_id,
            config=entry.config_name,
            rating=entry.rating,
            comments=entry.comments,
            generated_icon_url=entry.generated_icon_url,
            received_at=entry.received_at,
        )


def new_feedback_id() -> str:
    return f"fb_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def record_feedback(
    prompt_id: str | None,
    config_name: str | None,
    rating: Any,
    comments: Any,
    *,
    sink: FeedbackSink,
    generated_icon_url: Any = None,
) -> str:
    entry = FeedbackEntry(
        feedback_id=new_feedback_id(),
        prompt_id=prompt_id,
        config_name=config_name,
        rating=rating,
        comments=comments,
        generated_icon_url=generated_icon_url,
    )
    sink.record(entry)
    return entry.feedback_id
