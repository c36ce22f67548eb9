"""Builders for Admin SDK response objects used across tests."""

from types import SimpleNamespace


def batch_response(*outcomes):
    """BatchResponse-like object from a list of True/False send outcomes."""
    responses = [
        SimpleNamespace(success=ok, exception=None if ok else Exception('Requested entity was not found.'))
        for ok in outcomes
    ]
    success_count = sum(1 for ok in outcomes if ok)
    return SimpleNamespace(
        success_count=success_count,
        failure_count=len(outcomes) - success_count,
        responses=responses,
    )
