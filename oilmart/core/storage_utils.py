# oilmart/core/storage_utils.py
import uuid

from supabase import Client

from oilmart.core.config import get_settings


def upload_to_storage(store: Client, path: str, file_bytes: bytes, content_type: str) -> str:
    """
    Upload a file to Supabase Storage and return its public URL.

    If a file already exists at this path, it will be overwritten
    thanks to the 'upsert' option.

    Args:
        store: Supabase client allowed to write the bucket.
        path: Full object path inside the bucket.
              Example: "products/<uuid>.png"
        file_bytes: File content in bytes.
        content_type: MIME type stored with the object.

    Returns:
        Public URL to the uploaded file.

    Raises:
        Any exception raised by Supabase client if upload fails.
    """
    bucket = get_settings().STORAGE_BUCKET
    store.storage.from_(bucket).upload(
        path,
        file_bytes,
        {"content-type": content_type, "upsert": "true"},
    )
    return store.storage.from_(bucket).get_public_url(path)


def generate_filename(ext: str) -> str:
    """
    Generate a random filename using UUID4.

    Args:
        ext: File extension without dot (e.g. "png", "jpg")

    Returns:
        A filename like "<uuid4>.png"
    """
    return f"{uuid.uuid4()}.{ext}"
