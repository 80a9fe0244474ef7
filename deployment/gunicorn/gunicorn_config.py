import os

bind = os.getenv("GUNICORN_BIND", "unix:/var/www/poultry-records/gunicorn.sock")
workers = int(os.getenv("GUNICORN_WORKERS", "3"))
worker_class = "sync"
worker_tmp_dir = "/dev/shm"
max_requests = 1000
max_requests_jitter = 100
timeout = 60
keepalive = 5

# Logging
accesslog = "/var/log/poultry-records/access.log"
errorlog = "/var/log/poultry-records/error.log"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "poultry-records"

# Server mechanics
daemon = False
pidfile = "/var/run/poultry-records/gunicorn.pid"
umask = 0o007

# Server hooks
def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info("Starting poultry-records API")

def when_ready(server):
    server.log.info(f"poultry-records ready with {server.cfg.workers} workers")

def worker_abort(worker):
    """Called when a worker times out (usually a request stuck on a row lock)."""
    worker.log.warning(f"Worker {worker.pid} aborted")
