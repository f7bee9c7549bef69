"""Pydantic models for the GitHub webhook payload fields we read."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, model_validator


class _GitHubPayload(BaseModel):
    """Frozen, tolerant of unknown fields, constructible by field name or JSON name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        # A JSON null leaves the field at its zero value
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class CommitModel(_GitHubPayload):
    """Head commit of a push."""

    commit_hash: StrictStr = Field("", alias="id")
    commit_message: StrictStr = Field("", alias="message")
    distinct: StrictBool = False


class CodePushEventModel(_GitHubPayload):
    """Webhook payload for push events."""

    ref: StrictStr = ""
    deleted: StrictBool = False
    head_commit: CommitModel = Field(default_factory=CommitModel)


class BranchInfoModel(_GitHubPayload):
    """PR head (source) branch info."""

    ref: StrictStr = ""
    commit_hash: StrictStr = Field("", alias="sha")


class PullRequestInfoModel(_GitHubPayload):
    """Pull request details."""

    title: StrictStr = ""
    body: StrictStr = ""
    merged: StrictBool = False
    mergeable: StrictBool | None = None  # None until GitHub has computed it
    branch_info: BranchInfoModel = Field(default_factory=BranchInfoModel, alias="head")


class PullRequestEventModel(_GitHubPayload):
    """Webhook payload for pull_request events."""

    action: StrictStr = ""
    pull_request_id: StrictInt = Field(0, alias="number")
    pull_request_info: PullRequestInfoModel = Field(
        default_factory=PullRequestInfoModel,
        alias="pull_request",
    )
