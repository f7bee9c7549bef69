"""GitHub hook provider: push and pull_request events."""

import logging
from collections.abc import Mapping

from ..exceptions import HookError, UnsupportedEventError
from ..schemas.github_webhooks import CodePushEventModel, PullRequestEventModel
from ..schemas.trigger import HookCheckResult, TransformResult, TriggerAPIParamsModel
from .base import HookProvider, decode_json_body, get_header

logger = logging.getLogger(__name__)

EVENT_HEADER = "X-GitHub-Event"
CONTENT_TYPE_HEADER = "Content-Type"

PUSH_EVENT = "push"
PULL_REQUEST_EVENT = "pull_request"
SUPPORTED_EVENTS = frozenset({PUSH_EVENT, PULL_REQUEST_EVENT})

HEAD_REF_PREFIX = "refs/heads/"

# Pull request actions that change the code to build
BUILD_PULL_REQUEST_ACTIONS = frozenset({"opened", "reopened", "synchronize"})


def transform_code_push_event(code_push: CodePushEventModel) -> TransformResult:
    """Apply the push rules, first match wins."""
    if not code_push.head_commit.distinct:
        return TransformResult.skip("Head Commit is not Distinct")

    if code_push.deleted:
        return TransformResult.skip("This is a 'Deleted' event, no build can be started")

    if not code_push.ref.startswith(HEAD_REF_PREFIX):
        return TransformResult.skip(f"Ref ({code_push.ref}) is not a head ref")

    return TransformResult.success(
        TriggerAPIParamsModel(
            commit_hash=code_push.head_commit.commit_hash,
            commit_message=code_push.head_commit.commit_message,
            branch=code_push.ref.removeprefix(HEAD_REF_PREFIX),
        )
    )


def transform_pull_request_event(pull_request: PullRequestEventModel) -> TransformResult:
    """
    Apply the pull request rules, first match wins.

    An unknown mergeable state still builds: GitHub computes it in the
    background and it is often missing from the opened/synchronize payload.
    """
    action = pull_request.action
    info = pull_request.pull_request_info

    if not action:
        return TransformResult.skip("No Pull Request action specified")

    if action not in BUILD_PULL_REQUEST_ACTIONS:
        return TransformResult.skip(f"Pull Request action doesn't require a build: {action}")

    if info.merged:
        return TransformResult.skip("Pull Request already merged")

    if info.mergeable is False:
        return TransformResult.skip("Pull Request is not mergeable")

    commit_message = info.title
    if info.body:
        commit_message = f"{info.title}\n\n{info.body}"

    return TransformResult.success(
        TriggerAPIParamsModel(
            commit_hash=info.branch_info.commit_hash,
            commit_message=commit_message,
            branch=info.branch_info.ref,
            pull_request_id=pull_request.pull_request_id,
        )
    )


class GitHubHookProvider(HookProvider):
    """Handles webhooks sent by GitHub."""

    def hook_check(self, headers: Mapping[str, str]) -> HookCheckResult:
        event_type = get_header(headers, EVENT_HEADER)
        content_type = get_header(headers, CONTENT_TYPE_HEADER)

        if not event_type or not content_type:
            return HookCheckResult(is_supported_by_provider=False)

        if event_type not in SUPPORTED_EVENTS:
            return HookCheckResult(
                is_supported_by_provider=True,
                cant_transform_reason=f"Unsupported GitHub hook event type: {event_type}",
            )

        return HookCheckResult(is_supported_by_provider=True)

    def transform(self, headers: Mapping[str, str], body: bytes | None) -> TransformResult:
        event_type = get_header(headers, EVENT_HEADER)

        try:
            if event_type == PUSH_EVENT:
                result = transform_code_push_event(decode_json_body(body, CodePushEventModel))
            elif event_type == PULL_REQUEST_EVENT:
                result = transform_pull_request_event(
                    decode_json_body(body, PullRequestEventModel)
                )
            else:
                raise UnsupportedEventError(event_type)
        except HookError as e:
            logger.debug(f"GitHub {event_type or '<none>'} event failed: {e}")
            return TransformResult.failed(e)

        if result.should_skip:
            logger.debug(f"Skipping GitHub {event_type} event: {result.skip_reason}")
        return result
