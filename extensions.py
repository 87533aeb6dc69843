"""
Extensions module to avoid circular imports.
Should contain all Flask extension instances.
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Initialize extensions
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per day", "50 per hour"],
    storage_uri="memory://",
)
