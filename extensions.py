from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import os

# Shared limiter; routes add their own limits on top of the default.
# Limiting is switched off per app with RATELIMIT_ENABLED (see TestingConfig).
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=os.getenv("RATELIMIT_STORAGE_URL", "memory://"),
    strategy="fixed-window",
    default_limits=[os.getenv("RATELIMIT_DEFAULT", "300 per hour")],
    headers_enabled=True,
)
