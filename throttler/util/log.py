import logging
from pathlib import Path


class BracketLevelFormatter(logging.Formatter):
    """Render the level as "[INFO]"."""

    def format(self, record):
        record.bracketed = f"[{record.levelname}]"
        return super().format(record)


def configure(debug: bool, name: str, logfile: Path | None) -> logging.Logger:
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Logs go only to the file, never to the terminal the action shares
    logger.propagate = False

    # Do not add handlers twice
    if logger.handlers:
        for h in logger.handlers:
            h.setLevel(level)
        return logger

    handler: logging.Handler = logging.NullHandler()
    if logfile is not None:
        try:
            handler = logging.FileHandler(
                logfile, mode="a", encoding="utf-8", errors="backslashreplace"
            )
        except OSError:
            # An unwritable log location never stops a run
            pass

    handler.setLevel(level)
    formatter = BracketLevelFormatter(
        f"%(asctime)s %(bracketed)s {name}.%(funcName)s - %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
