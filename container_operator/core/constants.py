"""Constants used throughout container-operator."""


# Docker prefixes container names with this separator
NAME_PREFIX = "/"

# Timeout values
DEFAULT_TIMEOUT = 120  # 2 minutes, docker API calls
DEFAULT_WATCH_INTERVAL = 1.0
DEFAULT_WATCH_WAIT = 60.0

# Byte/time conversions for container stats
BYTES_PER_MB = 1024 * 1024
NANOSECONDS_PER_SECOND = 1_000_000_000

# Environment variables read by RuntimeConfig.from_env()
ENV_DOCKER_HOST = "CONTAINER_OPERATOR_DOCKER_HOST"
ENV_TIMEOUT = "CONTAINER_OPERATOR_TIMEOUT"
ENV_LIST_ALL = "CONTAINER_OPERATOR_LIST_ALL"
ENV_OPERATION_TIMEOUT = "CONTAINER_OPERATOR_OPERATION_TIMEOUT"
