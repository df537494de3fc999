from slowapi import Limiter
from slowapi.util import get_remote_address

# Per client IP; multi-instance deployments need a shared storage_uri.
limiter = Limiter(key_func=get_remote_address)
