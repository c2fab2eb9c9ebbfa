import logging

# Discovery and auth clients log every request at INFO/DEBUG.
GOOGLE_CLIENT_LOGGERS = (
    "googleapiclient",
    "googleapiclient.discovery_cache",
    "google.auth",
    "google_auth_httplib2",
    "urllib3",
)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    for name in GOOGLE_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
