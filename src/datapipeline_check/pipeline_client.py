"""
AWS Data Pipeline client wrapper.
"""
import boto3
from typing import Any, Dict, List, Optional, Tuple


class PipelineClient:
    """Handles the read-only Data Pipeline calls used by the check."""

    def __init__(self, client: Any):
        self.client = client

    @classmethod
    def from_credentials(
        cls,
        access_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        region: Optional[str] = None
    ) -> 'PipelineClient':
        """
        Create a wrapper around a new boto3 ``datapipeline`` client.

        Missing credentials are passed through as None so boto3 falls back
        to its default credential chain.
        """
        return cls(boto3.client(
            'datapipeline',
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            region_name=region
        ))

    def list_pipelines(self) -> Tuple[List[Dict[str, str]], Optional[str]]:
        """
        List every pipeline visible to the credentials, following pagination.

        Returns:
            Tuple of (pipelines, error_message)
            pipelines format: [{'id': ..., 'name': ...}, ...] in service order
        """
        pipelines = []

        try:
            paginator = self.client.get_paginator('list_pipelines')
            for page in paginator.paginate():
                pipelines.extend(page['pipelineIdList'])

            return pipelines, None

        except Exception as e:
            return [], str(e) or type(e).__name__

    def describe_pipelines(
        self,
        pipeline_ids: List[str]
    ) -> Tuple[List[Dict[str, Any]], Optional[str]]:
        """
        Fetch pipeline descriptions.

        Args:
            pipeline_ids: Pipeline ids to describe

        Returns:
            Tuple of (descriptions, error_message)
            descriptions format: [{'pipelineId': ..., 'fields': [{'key': ..., 'stringValue': ...}]}]
        """
        try:
            response = self.client.describe_pipelines(pipelineIds=list(pipeline_ids))
            return response['pipelineDescriptionList'], None

        except Exception as e:
            return [], str(e) or type(e).__name__
