import os

bind = os.getenv("GUNICORN_BIND", "unix:/var/www/halohub/submissions/gunicorn.sock")
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_class = "sync"
worker_tmp_dir = "/dev/shm"
max_requests = 1000
max_requests_jitter = 100
# Above the Turnstile verification timeout so a slow verifier fails cleanly
timeout = 30
keepalive = 5

wsgi_app = "core.wsgi:application"

# Logging
accesslog = "/var/log/halohub-submissions/access.log"
errorlog = "/var/log/halohub-submissions/error.log"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "halohub-submissions"

# Server mechanics
daemon = False
pidfile = "/var/run/halohub-submissions/gunicorn.pid"
user = "deploy"
group = "deploy"
umask = 0o007

# Server hooks
def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info("Starting submission service")

def when_ready(server):
    """Called just after the server is started."""
    server.log.info("Submission service is ready. Spawning workers")

def worker_abort(worker):
    """Called when a worker receives the SIGABRT signal, usually on timeout."""
    worker.log.info("Worker received SIGABRT signal")
