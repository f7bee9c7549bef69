"""Provider-agnostic trigger parameters and hook outcomes."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from ..exceptions import HookError


class TriggerAPIParamsModel(BaseModel):
    """Build parameters sent to the trigger API."""

    model_config = ConfigDict(frozen=True)

    commit_hash: str
    commit_message: str
    branch: str
    pull_request_id: int | None = None


@dataclass(frozen=True)
class HookCheckResult:
    """Outcome of the header-only capability check."""

    is_supported_by_provider: bool
    cant_transform_reason: str | None = None


@dataclass(frozen=True)
class TransformResult:
    """
    Outcome of a full transform.

    Exactly one of these holds:
    - should_skip is True and skip_reason explains why
    - error is set
    - trigger_api_params is set

    Use the skip/failed/success constructors rather than building one directly.
    """

    should_skip: bool = False
    skip_reason: str | None = None
    error: HookError | None = None
    trigger_api_params: TriggerAPIParamsModel | None = None

    @classmethod
    def skip(cls, reason: str) -> "TransformResult":
        return cls(should_skip=True, skip_reason=reason)

    @classmethod
    def failed(cls, error: HookError) -> "TransformResult":
        return cls(error=error)

    @classmethod
    def success(cls, params: TriggerAPIParamsModel) -> "TransformResult":
        return cls(trigger_api_params=params)
