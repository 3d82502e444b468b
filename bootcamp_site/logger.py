import logging

LOG_FORMAT = "%(asctime)s - [Instance %(instance_id)s] - %(levelname)s - %(message)s"


class InstanceFilter(logging.Filter):
    """Stamps every record with the configured instance identifier."""

    def __init__(self, instance_id: str) -> None:
        super().__init__()
        self.instance_id = instance_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.instance_id = self.instance_id
        return True


def configure_logging(instance_id: str, level: str = "INFO") -> None:
    handler = logging.StreamHandler()
    handler.addFilter(InstanceFilter(instance_id))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(level=level, handlers=[handler], force=True)

    # uvicorn installs its own handlers; route its error log through ours
    for name in ("uvicorn", "uvicorn.error"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True
