import time
from datetime import datetime, timezone

import psutil

from skumatch.common.base.base_service import BaseService
from skumatch.services.system.logger_service import get_logger

logger = get_logger(__name__)


class HealthService(BaseService):
    def __init__(self):
        self.startup_time = datetime.now(timezone.utc)
        self._process = psutil.Process()

    def get_simple_health(self):
        return {
            'ok': True,
            'ts': int(time.time() * 1000),
        }

    def get_health_data(self):
        uptime_seconds = (datetime.now(timezone.utc) - self.startup_time).total_seconds()
        memory = self._process.memory_info()

        return {
            **self.get_simple_health(),
            'status': 'healthy',
            'started_at': self.startup_time.isoformat(),
            'uptime_seconds': round(uptime_seconds, 1),
            'process': {
                'rss_mb': round(memory.rss / (1024 * 1024), 1),
                'threads': self._process.num_threads(),
            },
        }
