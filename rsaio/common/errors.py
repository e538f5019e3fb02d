from __future__ import annotations
import os
from typing import Optional, Union

PathLike = Union[str, os.PathLike]
PathArg = Optional[PathLike]


# ---- Key store failures ---- #
class KeyStoreError(Exception):
    def __init__(self, msg: str, path: PathArg = None):
        self.path = os.fspath(path) if path is not None else None
        super().__init__(f"{msg} ({self.path})" if self.path else msg)


class KeyFileNotFound(KeyStoreError, FileNotFoundError):
    # A key file expected in the directory is missing.
    pass


class KeyFileIOError(KeyStoreError, OSError):
    # Opening, reading or writing a key file failed.
    pass


class KeyFormatError(KeyStoreError, ValueError):
    # File content is not base64 of an RSA SPKI / PKCS#8 DER structure.
    pass
