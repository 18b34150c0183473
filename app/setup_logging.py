import logging, sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"

# Third-party loggers that are far too chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "openai")

def setup_logging(level: str = "INFO"):
    root = logging.getLogger()
    if root.handlers:  # don’t double add during reload
        return
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
