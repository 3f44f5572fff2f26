"""This package contains parser functions for bosh output.

Parsers never raise: output they cannot make sense of yields an
unrecognized or empty result and the workflow decides what it means.
"""

from .deploy import parse_deploy_output
from .deployments import parse_deployments_table

__all__ = ["parse_deploy_output", "parse_deployments_table"]
