"""
Logging configuration and utilities for snowhook.
"""

import logging
import sys

# Endpoints polled by Prometheus and Kubernetes probes
MONITORING_PATHS = ("/health", "/metrics")


class HealthEndpointFilter(logging.Filter):
    """
    Filter to suppress logging of successful health and metrics endpoint requests.
    
    Prometheus scrapes /metrics and Kubernetes probes /health every few seconds;
    logging each successful request drowns the webhook traffic we care about.
    
    Only logs requests that have errors or return non-2xx status codes.
    """
    
    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter out successful monitoring endpoint requests.
        
        Args:
            record: Log record to filter
            
        Returns:
            False to suppress the log record, True to allow it through
        """
        if hasattr(record, 'args') and record.args:
            # uvicorn access log format: (client, method, path, http_version, status_code)
            try:
                if len(record.args) >= 5:
                    method = record.args[1]
                    path = record.args[2]
                    status_code = record.args[4]
                    
                    if method == "GET" and path in MONITORING_PATHS:
                        if isinstance(status_code, int) and 200 <= status_code < 300:
                            return False
            except (IndexError, TypeError, AttributeError):
                pass
        
        return True


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging to stdout.
    
    Args:
        log_level: The log level to use (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        
    Raises:
        ValueError: If log_level is not a valid logging level name
    """
    log_level_upper = log_level.upper()
    if log_level_upper not in logging._nameToLevel:
        raise ValueError(f"Invalid log level: {log_level}")
    
    numeric_level = logging._nameToLevel[log_level_upper]
    
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True  # Override any existing configuration
    )
    
    logging.getLogger('snowhook').setLevel(numeric_level)
    logging.getLogger('uvicorn').setLevel(logging.INFO)
    
    # httpx logs every ServiceNow request at INFO
    logging.getLogger('httpx').setLevel(logging.WARNING)
    
    # Called by both the CLI and the app lifespan; install the filter once
    uvicorn_access_logger = logging.getLogger('uvicorn.access')
    if not any(isinstance(f, HealthEndpointFilter) for f in uvicorn_access_logger.filters):
        uvicorn_access_logger.addFilter(HealthEndpointFilter())


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get a logger under the ``snowhook`` namespace.
    
    Args:
        module_name: The module name (e.g., __name__); names outside the
            package are nested under ``snowhook.``
        
    Returns:
        logging.Logger: Configured logger instance
    """
    if module_name != "snowhook" and not module_name.startswith("snowhook."):
        module_name = f"snowhook.{module_name}"
    
    return logging.getLogger(module_name)
