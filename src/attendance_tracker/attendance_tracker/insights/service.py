from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_futures
from typing import Callable, Optional, Sequence

from ..attendance.aggregation import student_summaries
from ..attendance.model import AttendanceRecord
from ..core.constants import (
    EMAIL_TEMPERATURE,
    EMPTY_INSIGHT,
    INSIGHT_FALLBACK,
    INSIGHT_TEMPERATURE,
    INSIGHT_TOP_P,
)
from ..core.enums import JobState
from ..core.exceptions import NotFoundError
from ..students.model import Student
from .generator import InsightGenerator
from .prompts import insights_prompt, notification_fallback, notification_prompt

logger = logging.getLogger(__name__)

MAX_TRACKED_JOBS = 100


class InsightJob:
    """A pending piece of generated text.

    Always ends in READY (model text), FAILED (fallback text) or CANCELLED
    (no text).
    """

    def __init__(self, job_id: str, kind: str):
        self.job_id = job_id
        self.kind = kind
        self._state = JobState.PENDING
        self._text: Optional[str] = None
        self._lock = threading.Lock()
        self._future: Optional[Future] = None

    @property
    def state(self) -> JobState:
        return self._state

    @property
    def text(self) -> Optional[str]:
        return self._text

    @property
    def done(self) -> bool:
        return self._state != JobState.PENDING

    def complete(self, state: JobState, text: Optional[str]) -> bool:
        with self._lock:
            if self._state != JobState.PENDING:
                return False
            self._state = state
            self._text = text
            return True

    def attach(self, future: Future) -> None:
        self._future = future

    def cancel(self) -> bool:
        if self._future is not None:
            self._future.cancel()
        return self.complete(JobState.CANCELLED, None)

    def wait(self, timeout: Optional[float] = None) -> "InsightJob":
        if self._future is not None:
            wait_futures([self._future], timeout=timeout)
        return self

    def to_dict(self) -> dict:
        return {
            "job_id": self.job_id,
            "kind": self.kind,
            "state": self._state.value,
            "text": self._text,
        }


class InsightService:
    """Use case: AI-written insights and notification drafts.

    Generation runs off the calling thread. A failure never reaches the
    caller: the job resolves to a static fallback message instead.
    """

    def __init__(self, generator: InsightGenerator, *, executor: Optional[Executor] = None, max_workers: int = 2):
        self._generator = generator
        self._executor = executor or ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="insights")
        self._jobs: "OrderedDict[str, InsightJob]" = OrderedDict()
        self._jobs_lock = threading.Lock()

    # ---- synchronous helpers -------------------------------------------------

    def _generate(self, prompt: str, *, temperature: float, top_p: Optional[float], fallback: str) -> tuple[JobState, str]:
        try:
            text = self._generator.generate(prompt, temperature=temperature, top_p=top_p)
        except Exception:
            logger.exception("Text generation failed, using fallback")
            return JobState.FAILED, fallback
        return JobState.READY, text.strip() or EMPTY_INSIGHT

    def generate_insights(self, students: Sequence[Student], records: Sequence[AttendanceRecord]) -> str:
        prompt = insights_prompt(student_summaries(students, records))
        _, text = self._generate(prompt, temperature=INSIGHT_TEMPERATURE, top_p=INSIGHT_TOP_P, fallback=INSIGHT_FALLBACK)
        return text

    def generate_notification(self, student: Student, absences: int) -> str:
        _, text = self._generate(
            notification_prompt(student.name, absences),
            temperature=EMAIL_TEMPERATURE,
            top_p=None,
            fallback=notification_fallback(student.name, absences),
        )
        return text

    # ---- background jobs ------------------------------------------------------

    def _evict_finished(self) -> None:
        """Drop the oldest finished jobs beyond MAX_TRACKED_JOBS; pending jobs stay pollable."""
        excess = len(self._jobs) - MAX_TRACKED_JOBS
        if excess <= 0:
            return
        for job_id in [jid for jid, job in self._jobs.items() if job.done][:excess]:
            del self._jobs[job_id]

    def _submit(self, kind: str, work: Callable[[], tuple[JobState, str]]) -> InsightJob:
        job = InsightJob(uuid.uuid4().hex, kind)

        def run() -> None:
            if job.done:
                return
            state, text = work()
            if not job.complete(state, text):
                logger.info("Discarding result of %s job %s (%s)", kind, job.job_id, job.state.value)

        with self._jobs_lock:
            self._jobs[job.job_id] = job
            self._evict_finished()

        job.attach(self._executor.submit(run))
        return job

    def request_insights(self, students: Sequence[Student], records: Sequence[AttendanceRecord]) -> InsightJob:
        # only the compact summary leaves this process, never the raw log
        prompt = insights_prompt(student_summaries(students, records))
        return self._submit(
            "insights",
            lambda: self._generate(prompt, temperature=INSIGHT_TEMPERATURE, top_p=INSIGHT_TOP_P, fallback=INSIGHT_FALLBACK),
        )

    def request_notification(self, student: Student, absences: int) -> InsightJob:
        prompt = notification_prompt(student.name, absences)
        fallback = notification_fallback(student.name, absences)
        return self._submit(
            "notification",
            lambda: self._generate(prompt, temperature=EMAIL_TEMPERATURE, top_p=None, fallback=fallback),
        )

    def get_job(self, job_id: str) -> InsightJob:
        with self._jobs_lock:
            job = self._jobs.get(job_id)
        if not job:
            raise NotFoundError(f"Unknown job: {job_id}")
        return job

    def cancel(self, job_id: str) -> InsightJob:
        job = self.get_job(job_id)
        if job.cancel():
            logger.info("Cancelled %s job %s", job.kind, job.job_id)
        return job

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
