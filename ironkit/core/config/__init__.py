"""
Configuration Module

Type-safe configuration for the queue and cache clients.

Components:
-----------
- **settings.py**: Pydantic-based configuration with environment variable loading
- **constants.py**: Hosts, endpoint templates, confirmation strings and stage ids

Environment Variables:
---------------------
```bash
IRON_PROJECT_ID=...
IRON_TOKEN=...
IRON_MQ_HOST=mq-aws-us-east-1.iron.io
IRON_CACHE_HOST=cache-aws-us-east-1.iron.io
IRON_BACKOFF_FACTOR=25
LOG_LEVEL=INFO
LOG_FORMAT=json
```

Testing:
-------
```python
import os
from ironkit.core.config import reload_settings

os.environ["IRON_PROJECT_ID"] = "test-project"
settings = reload_settings()
assert settings.iron.IRON_PROJECT_ID == "test-project"
```
"""

from ironkit.core.config.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_BACKOFF_FACTOR_MS,
    DEFAULT_CACHE_HOST,
    DEFAULT_MQ_HOST,
    MSG_CACHE_DELETED,
    MSG_CACHE_STORED,
    MSG_MESSAGE_DELETED,
    MSG_MESSAGES_POSTED,
    MSG_QUEUE_CLEARED,
    CloudHost,
    Stage,
)
from ironkit.core.config.settings import Settings, get_settings, reload_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    # Enums
    "Stage",
    "CloudHost",
    # Defaults
    "DEFAULT_API_VERSION",
    "DEFAULT_BACKOFF_FACTOR_MS",
    "DEFAULT_CACHE_HOST",
    "DEFAULT_MQ_HOST",
    # Confirmation strings
    "MSG_MESSAGES_POSTED",
    "MSG_MESSAGE_DELETED",
    "MSG_QUEUE_CLEARED",
    "MSG_CACHE_STORED",
    "MSG_CACHE_DELETED",
]
