"""
Configuration-related exceptions for snowhook.

Every error raised while turning flags, environment and the ServiceNow
credentials file into a running client is a ConfigurationError, so startup
has a single exception type to treat as fatal.
"""


class ConfigurationError(Exception):
    """
    Raised when configuration loading or validation fails.
    
    This exception is used for all configuration-related errors including:
    - File loading issues (permissions, not found, etc.)
    - YAML parsing errors
    - Pydantic validation failures
    - Credentials that cannot be used to build a ServiceNow client
    """
    pass
