"""
Pipeline status and health check.
"""
import re
import sys
from typing import Dict, List, Optional, Tuple

from datapipeline_check.check_result import CheckResult
from datapipeline_check.config_loader import CheckConfig
from datapipeline_check.pipeline_client import PipelineClient


STATUS_FIELD = '@pipelineState'
HEALTH_FIELD = '@healthStatus'


class PipelineLookupError(Exception):
    """Raised when a remote call fails or returns something unusable."""


class PipelineHealthChecker:
    """Resolves a pipeline by name and matches its state against patterns."""

    def __init__(self, client: Optional[PipelineClient] = None, verbose: bool = False):
        self.client = client
        self.verbose = verbose

    def _log(self, subject: str, message: str) -> None:
        if self.verbose:
            print(f"[{subject}] {message}", file=sys.stderr)

    def get_pipeline_id(self, pipeline_name: str) -> Optional[str]:
        """
        Find the id of the first listed pipeline whose name equals
        ``pipeline_name`` exactly.

        Returns:
            Pipeline id, or None if no pipeline has that name
        """
        pipelines, err = self.client.list_pipelines()
        if err:
            raise PipelineLookupError(err)

        self._log(pipeline_name, f"Listed {len(pipelines)} pipeline(s)")

        for pipeline in pipelines:
            if pipeline['name'] == pipeline_name:
                return pipeline['id']
        return None

    @staticmethod
    def pipeline_field(key: str, fields: List[Dict[str, str]]) -> Optional[str]:
        """Value of the first field with the given key, None if absent."""
        for field in fields:
            if field.get('key') == key:
                return field.get('stringValue')
        return None

    def get_pipeline_state(self, pipeline_id: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Fetch the status and health of a pipeline.

        Args:
            pipeline_id: Remote pipeline id

        Returns:
            Tuple of (status, health); either may be None
        """
        descriptions, err = self.client.describe_pipelines([pipeline_id])
        if err:
            raise PipelineLookupError(err)
        if not descriptions:
            raise PipelineLookupError(f"No description returned for pipeline id {pipeline_id}")

        fields = descriptions[0].get('fields', [])
        status = self.pipeline_field(STATUS_FIELD, fields)
        health = self.pipeline_field(HEALTH_FIELD, fields)
        return status, health

    @staticmethod
    def _compile(kind: str, pattern: str) -> re.Pattern:
        try:
            return re.compile(pattern)
        except re.error as e:
            raise PipelineLookupError(f"Invalid {kind} pattern '{pattern}': {e}")

    @staticmethod
    def matches(pattern: re.Pattern, value: Optional[str]) -> bool:
        """Unanchored search; an absent value never matches."""
        if value is None:
            return False
        return pattern.search(value) is not None

    def run(self, config: CheckConfig) -> CheckResult:
        """
        Check one pipeline.

        Args:
            config: Check configuration

        Returns:
            CheckResult with outcome OK, CRITICAL or UNKNOWN
        """
        name = config.pipeline_name

        try:
            if self.client is None:
                self.client = PipelineClient.from_credentials(
                    config.aws_access_key,
                    config.aws_secret_access_key,
                    config.aws_region
                )

            pipeline_id = self.get_pipeline_id(name)
            if pipeline_id is None:
                return CheckResult.critical(f"Pipeline {name} not found!")

            self._log(name, f"Resolved id {pipeline_id}")

            status, health = self.get_pipeline_state(pipeline_id)
            self._log(name, f"Status {status!r}, health {health!r}")

            status_re = self._compile('status', config.status_pattern)
            health_re = self._compile('health', config.health_pattern)

            shown_status = status if status is not None else ''
            shown_health = health if health is not None else ''

            if self.matches(status_re, status) and self.matches(health_re, health):
                return CheckResult.ok(
                    f"Pipeline '{name}' status is '{shown_status}' and health is '{shown_health}'"
                )
            return CheckResult.critical(
                f"Unmatched state - pipeline '{name}' status is '{shown_status}' and health is '{shown_health}'"
            )

        except Exception as e:
            self._log(name, f"Check failed: {type(e).__name__}")
            return CheckResult.unknown(f"Pipeline '{name}' - {str(e)}")
