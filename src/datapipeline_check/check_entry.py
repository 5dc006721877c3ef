"""
Command line entry point for the Data Pipeline check.

Usage:
    check-datapipeline --pipeline-name mypipeline --status 'SCHEDULED|RUNNING' --health HEALTHY
"""
import argparse
import sys
from typing import List, Mapping, Optional

from datapipeline_check.check_result import CheckResult, Outcome
from datapipeline_check.config_loader import ConfigurationError, load_check_config
from datapipeline_check.health_checker import PipelineHealthChecker
from datapipeline_check.pipeline_client import PipelineClient


class CheckArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors as UNKNOWN."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(Outcome.UNKNOWN.value, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    # -h is the health pattern, so help is --help only
    parser = CheckArgumentParser(
        prog='check-datapipeline',
        description='Check and alert for AWS Data Pipeline status and health',
        add_help=False
    )
    parser.add_argument('--help', action='help', help='Show this help message and exit')
    parser.add_argument(
        '-a', '--aws-access-key', dest='aws_access_key',
        help='AWS Access Key. Either set AWS_ACCESS_KEY or provide it as an option'
    )
    parser.add_argument(
        '-k', '--aws-secret-access-key', dest='aws_secret_access_key',
        help='AWS Secret Access Key. Either set AWS_SECRET_KEY or provide it as an option'
    )
    parser.add_argument(
        '-r', '--aws-region', dest='aws_region',
        help='AWS Region (defaults to AWS_REGION, then us-east-1)'
    )
    parser.add_argument('-p', '--pipeline-name', dest='pipeline_name', help='The name of the data pipeline')
    parser.add_argument('-s', '--status', dest='status', help='Pipeline status regex')
    parser.add_argument('-h', '--health', dest='health', help='Pipeline health regex')
    parser.add_argument('-c', '--config', dest='config', help='Optional YAML config file')
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Print progress diagnostics to stderr'
    )
    return parser


def handler(
    argv: Optional[List[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    client: Optional[PipelineClient] = None
) -> int:
    """
    Run the check once and print its message.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]
        environ: Environment mapping, defaults to os.environ
        client: Optional pre-built PipelineClient

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_check_config(args, environ)
    except ConfigurationError as e:
        result = CheckResult.unknown(f"Configuration error: {e}")
    else:
        checker = PipelineHealthChecker(client=client, verbose=config.verbose)
        result = checker.run(config)

    print(result.message)
    return result.exit_code


def main() -> None:
    sys.exit(handler())


if __name__ == "__main__":
    main()
