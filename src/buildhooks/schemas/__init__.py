"""Pydantic schemas for webhook payloads and trigger parameters."""

from .github_webhooks import (
    BranchInfoModel,
    CodePushEventModel,
    CommitModel,
    PullRequestEventModel,
    PullRequestInfoModel,
)
from .trigger import HookCheckResult, TransformResult, TriggerAPIParamsModel

__all__ = [
    "BranchInfoModel",
    "CodePushEventModel",
    "CommitModel",
    "HookCheckResult",
    "PullRequestEventModel",
    "PullRequestInfoModel",
    "TransformResult",
    "TriggerAPIParamsModel",
]
