"""Step results and the aggregated composition report."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class StepResult:
    """Outcome of one fetch/copy/write step."""

    step: str
    ok: bool
    message: str = ""
    skipped: bool = False
    merged: bool = False

    @classmethod
    def success(cls, step: str, message: str = "") -> StepResult:
        return cls(step=step, ok=True, message=message)

    @classmethod
    def failure(cls, step: str, message: str) -> StepResult:
        return cls(step=step, ok=False, message=message)

    @classmethod
    def skip(cls, step: str, message: str = "") -> StepResult:
        """Optional input missing; not an error."""
        return cls(step=step, ok=True, message=message, skipped=True)

    def with_merge(self) -> StepResult:
        """Same result, marked as having placed a codebase in its target."""
        return replace(self, merged=True)


@dataclass
class CompositionReport:
    """All step results of one ``init``/``update`` run.

    ``ok`` is False only when the composition failed as a whole; failed
    optional steps (a download, a missing template) are reported through
    ``failures`` and leave ``ok`` untouched.
    """

    steps: list[StepResult] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failures(self) -> list[StepResult]:
        return [step for step in self.steps if not step.ok]

    @property
    def skipped(self) -> list[StepResult]:
        return [step for step in self.steps if step.skipped]

    def add(self, result: StepResult) -> StepResult:
        self.steps.append(result)
        return result

    def extend(self, results: list[StepResult]) -> None:
        self.steps.extend(results)

    def fail(self, error: str) -> None:
        self.error = error

    def find(self, step: str) -> list[StepResult]:
        """Return every result recorded under ``step``."""
        return [result for result in self.steps if result.step == step]
