"""
Configuration loading for the Data Pipeline check.
"""
import os
import yaml
from dataclasses import dataclass
from typing import Dict, Any, Mapping, Optional


DEFAULT_REGION = 'us-east-1'

ACCESS_KEY_ENV = 'AWS_ACCESS_KEY'
SECRET_KEY_ENV = 'AWS_SECRET_KEY'
REGION_ENV = 'AWS_REGION'


class ConfigurationError(Exception):
    """Raised when the check cannot be configured from the supplied inputs."""


@dataclass
class CheckConfig:
    """Settings for one check invocation."""

    pipeline_name: str
    status_pattern: str
    health_pattern: str
    aws_access_key: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_region: str = DEFAULT_REGION
    verbose: bool = False


class ConfigLoader:
    """Handles loading and parsing of the optional YAML config file."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.config = self._load_config() if config_path else {}

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, 'r') as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing configuration file: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"Configuration file must contain a mapping: {self.config_path}")

        for section in ('aws', 'pipeline'):
            value = config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ValueError(f"Section '{section}' in {self.config_path} must be a mapping")

        if not isinstance(config.get('verbose', False), bool):
            raise ValueError(f"'verbose' in {self.config_path} must be true or false")

        return config

    @property
    def aws_config(self) -> Dict[str, Any]:
        """Get AWS credentials and region."""
        return self.config.get('aws') or {}

    @property
    def pipeline_config(self) -> Dict[str, Any]:
        """Get pipeline name and match patterns."""
        return self.config.get('pipeline') or {}

    @property
    def verbose(self) -> bool:
        return self.config.get('verbose', False)


def _first_set(*values):
    for value in values:
        if value is not None and value != '':
            return value
    return None


def _first_given(*values):
    # empty patterns are valid and match any present value
    for value in values:
        if value is not None:
            return value
    return None


def load_check_config(
    args: Any,
    environ: Optional[Mapping[str, str]] = None
) -> CheckConfig:
    """
    Build a CheckConfig from parsed CLI options, the environment and the
    optional YAML file named by ``args.config``.

    Each setting resolves as: command line flag, environment variable,
    YAML file, static default.

    Args:
        args: Parsed options (argparse namespace)
        environ: Environment mapping, defaults to os.environ

    Returns:
        Validated CheckConfig
    """
    if environ is None:
        environ = os.environ

    try:
        loader = ConfigLoader(getattr(args, 'config', None))
    except (FileNotFoundError, ValueError) as e:
        raise ConfigurationError(str(e))

    aws = loader.aws_config
    pipeline = loader.pipeline_config

    access_key = _first_set(
        getattr(args, 'aws_access_key', None),
        environ.get(ACCESS_KEY_ENV),
        aws.get('access_key')
    )
    secret_key = _first_set(
        getattr(args, 'aws_secret_access_key', None),
        environ.get(SECRET_KEY_ENV),
        aws.get('secret_access_key')
    )
    region = _first_set(
        getattr(args, 'aws_region', None),
        environ.get(REGION_ENV),
        aws.get('region'),
        DEFAULT_REGION
    )

    pipeline_name = _first_set(getattr(args, 'pipeline_name', None), pipeline.get('name'))
    status_pattern = _first_given(getattr(args, 'status', None), pipeline.get('status'))
    health_pattern = _first_given(getattr(args, 'health', None), pipeline.get('health'))

    missing = [
        flag for flag, value in (
            ('--pipeline-name', pipeline_name),
            ('--status', status_pattern),
            ('--health', health_pattern)
        )
        if value is None
    ]
    if missing:
        raise ConfigurationError(f"Missing required option(s): {', '.join(missing)}")

    return CheckConfig(
        pipeline_name=str(pipeline_name),
        status_pattern=str(status_pattern),
        health_pattern=str(health_pattern),
        aws_access_key=access_key,
        aws_secret_access_key=secret_key,
        aws_region=str(region),
        verbose=bool(getattr(args, 'verbose', False)) or loader.verbose
    )
