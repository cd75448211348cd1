"""Core types: results, exit codes, policies and configuration."""

from .config import ConfigError, ReleaseConfig, load_config, load_config_or_default
from .errors import ErrorCode
from .policy import Computed, Constant, Policy, policy_from_value, resolve_policy
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "ConfigError",
    "ReleaseConfig",
    "load_config",
    "load_config_or_default",
    # errors
    "ErrorCode",
    # policy
    "Computed",
    "Constant",
    "Policy",
    "policy_from_value",
    "resolve_policy",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
