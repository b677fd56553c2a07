from fastapi import UploadFile

from infra_api.core.errors import ClientInputError


def read_upload(file: UploadFile, max_bytes: int) -> bytes:
    # read one byte past the limit instead of trusting the declared size
    content = file.file.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise ClientInputError(f"File too large (limit is {max_bytes} bytes)")
    return content
