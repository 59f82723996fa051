import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)-8s - [%(name)s] - [%(filename)s:%(lineno)d] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_LOGGING_ENV = "IMESWITCH_ENABLE_FILE_LOGGING"
DEFAULT_LOG_FILE = os.path.join(
    os.path.expanduser("~"), ".imeswitch_logs", "imeswitch.log"
)


def configure_logging(level: int = logging.DEBUG, log_file_path: str = DEFAULT_LOG_FILE):
    """Install the console (and optional file) handlers on the root logger.

    Intended for the embedding service's startup. File logging is turned on
    with IMESWITCH_ENABLE_FILE_LOGGING=true.
    """
    root_logger = logging.getLogger()

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:  # Iterate over a copy
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if sys.stderr is not None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    root_logger.setLevel(level)

    want_file_logging = os.environ.get(FILE_LOGGING_ENV, "false").lower() == "true"
    if want_file_logging:
        try:
            os.makedirs(os.path.dirname(log_file_path), exist_ok=True)
            file_handler = logging.FileHandler(log_file_path, mode="a")  # Append mode
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.DEBUG)
            root_logger.addHandler(file_handler)
            logging.info(f"File logging enabled: {log_file_path}")
        except OSError as e_file_log:
            logging.error(
                f"Failed to initialize file logging: {e_file_log}", exc_info=True
            )
    else:
        logging.debug(
            f"File logging disabled. To enable, set {FILE_LOGGING_ENV}=true."
        )
    return root_logger
