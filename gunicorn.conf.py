# Gunicorn configuration for blogdesk

import multiprocessing
import os

wsgi_app = "blogdesk:create_app()"

# Server socket
bind = os.getenv("GUNICORN_BIND", "127.0.0.1:8000")

# Worker processes
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))
worker_class = "gthread"
threads = 2

# Worker lifecycle
max_requests = 1000
max_requests_jitter = 100
# Admin writes sleep before processing, keep well above POST_WRITE_DELAY_SECONDS
timeout = 30
keepalive = 2
preload_app = True

# Security
limit_request_line = 4096
limit_request_fields = 100
limit_request_field_size = 8190

# Process management: only drop privileges when running as root
if hasattr(os, "geteuid") and os.geteuid() == 0:
    user = os.getenv("GUNICORN_USER", "blogdesk")
    group = os.getenv("GUNICORN_GROUP", "blogdesk")

# Logging
accesslog = os.getenv("GUNICORN_ACCESS_LOG", "-")
errorlog = os.getenv("GUNICORN_ERROR_LOG", "-")
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'
