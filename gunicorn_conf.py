import os

# gunicorn -c gunicorn_conf.py
wsgi_app = "search_gateway.main:app"
worker_class = "uvicorn.workers.UvicornWorker"

bind = f"0.0.0.0:{os.getenv('PORT', '8000')}"

# Each worker holds its own pooled ES client; requests within a worker run in
# FastAPI's threadpool
workers = int(os.getenv("WEB_CONCURRENCY", "2"))

# Trust the load balancer proxy for client IPs
forwarded_allow_ips = "*"

# Timeouts / keepalive. Keep timeout above ES connect + socket timeout so a
# slow cluster surfaces as a query error, not a killed worker
timeout = int(os.getenv("TIMEOUT", "60"))
graceful_timeout = int(os.getenv("GRACEFUL_TIMEOUT", "30"))
keepalive = int(os.getenv("KEEPALIVE", "5"))

# Logging to stdout/stderr
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOGLEVEL", "info")
