import os
import shutil
import tempfile


def read_file(path: str) -> bytes:
    with open(path, 'rb') as res:
        return res.read()


def write_file(path: str, data: bytes) -> int:
    """Write data to path through a temporary file in the same directory.

    The target is replaced only after all data was written.
    """
    dirname = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(
        prefix=f'.{os.path.basename(path)}.', suffix='.tmp', dir=dirname
    )
    try:
        with os.fdopen(fd, 'wb') as res:
            written = res.write(data)
        if os.path.exists(path):
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise
    return written
