from types import MappingProxyType

CLUSTER_ARN_REFRESH_INTERVAL = 10  # minutes
CLUSTER_REFRESH_INTERVAL = 10  # seconds
SERVICE_ARN_REFRESH_INTERVAL = 60  # seconds
SERVICE_REFRESH_INTERVAL = 10  # seconds
TASK_CHURN_DETECTION_BUFFER_COUNT = 3
TASK_CHURN_DETECTION_TIME_THRESHOLD = 10  # minutes
TASK_DEFINITION_REFRESH_INTERVAL = 10  # seconds
TASK_STREAM_REFRESH_INTERVAL = 10  # seconds
CONTAINER_INSTANCES_REFRESH_INTERVAL = 60  # seconds
DEFAULT_STATS_REFRESH_INTERVAL = 10  # seconds

DEFAULT_SETTINGS = MappingProxyType({"log_group": "ecs"})

PRODUCTION_HTTP_TIMEOUT_MS = 5000
