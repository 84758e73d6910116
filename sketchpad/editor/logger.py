# logger.py
import logging
import sys


def setup_logging(level=logging.INFO):  # type: ignore
    """
    Send the editor's log records (edits, undo, redo) to stdout.

    Parameters:
    - level (int): Logging level, logging.DEBUG also traces the history stacks.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Leave an embedding application's handlers alone
    if not logger.handlers:
        sh = logging.StreamHandler(sys.stdout)
        sh.setLevel(level)
        sh.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(sh)
