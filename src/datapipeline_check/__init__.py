"""
AWS Data Pipeline status and health check for Sensu/Nagios style monitoring.
"""
from datapipeline_check.check_result import CheckResult, Outcome
from datapipeline_check.config_loader import CheckConfig, ConfigurationError
from datapipeline_check.health_checker import PipelineHealthChecker
from datapipeline_check.pipeline_client import PipelineClient

__version__ = '1.0.0'

__all__ = [
    'CheckConfig',
    'CheckResult',
    'ConfigurationError',
    'Outcome',
    'PipelineClient',
    'PipelineHealthChecker',
]
