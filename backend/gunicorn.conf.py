import os

# App & bind
wsgi_app = "cadastro:create_app()"
bind = f"0.0.0.0:{os.getenv('PORT', '4568')}"
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
threads = 1
# Above the postal lookup timeout so a slow lookup never kills the worker
timeout = 30
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Trust proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
