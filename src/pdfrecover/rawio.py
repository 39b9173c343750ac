import logging

from .exceptions import DumpReadError

logger = logging.getLogger(__name__)

def read_dump(path: str) -> bytes:
    """Read a whole dump file into memory and return it as immutable bytes.

    The file is read with one unbuffered ``read()``, which sizes the
    result from the file length, so a multi-GB dump is held only once.
    Any OS level failure (missing file, permission, short device) is
    fatal for the run and surfaces as :class:`DumpReadError`.
    """
    if not path:
        raise DumpReadError("No source dump given")
    try:
        with open(path, "rb", buffering=0) as fin:
            data = fin.read()
    except OSError as e:
        raise DumpReadError(f"Failed to read dump: {path}: {e}") from e
    logger.info("Read %d bytes from %s", len(data), path)
    return data
