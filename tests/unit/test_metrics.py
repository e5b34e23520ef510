"""
Unit tests for formgate.engine.metrics.
"""
from prometheus_client import REGISTRY

from formgate.engine.metrics import record_stage_failure, record_validation, timed_stage


def _sample(name, labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetrics:
    def test_record_validation_increments(self):
        labels = {"mode": "init", "status": "mismatch"}
        before = _sample("formgate_validations_total", labels)
        record_validation("init", "mismatch")
        assert _sample("formgate_validations_total", labels) == before + 1

    def test_record_stage_failure_increments(self):
        before = _sample("formgate_stage_failures_total", {"stage": "match"})
        record_stage_failure("match")
        assert _sample("formgate_stage_failures_total", {"stage": "match"}) == before + 1

    def test_timed_stage_observes(self):
        before = _sample("formgate_stage_seconds_count", {"stage": "required"})
        with timed_stage("required"):
            pass
        assert _sample("formgate_stage_seconds_count", {"stage": "required"}) == before + 1
