"""
Object storage for evidence files

Files are stored on the local filesystem under ``<BASE_UPLOAD_DIR>/<bucket>``
and exposed through public URLs served by the storage route.
"""

import os
import logging
from concurrent.futures import ThreadPoolExecutor
from urllib.parse import quote

from utils.security import is_safe_object_name

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when an object cannot be stored or addressed"""


class EvidenceStorage:
    """Bucket-style file storage with upload-by-path and public URL retrieval"""

    def __init__(self, root_dir: str, bucket: str, public_base_url: str, max_workers: int = 4):
        self.root_dir = os.path.abspath(root_dir)
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")
        self.max_workers = max(1, max_workers)

    @classmethod
    def from_config(cls, config):
        return cls(
            root_dir=config["BASE_UPLOAD_DIR"],
            bucket=config["EVIDENCE_BUCKET"],
            public_base_url=config["STORAGE_PUBLIC_URL"],
            max_workers=config.get("UPLOAD_WORKERS", 4),
        )

    @property
    def bucket_dir(self) -> str:
        return os.path.join(self.root_dir, self.bucket)

    def resolve(self, path: str) -> str:
        """Absolute filesystem location of an object path, confined to the bucket"""
        full_path = os.path.abspath(os.path.join(self.bucket_dir, path))
        if not full_path.startswith(self.bucket_dir + os.sep):
            raise StorageError(f"Invalid object path: {path}")
        return full_path

    def upload(self, path: str, file) -> str:
        """Store ``file`` (a werkzeug FileStorage) at ``path``; existing objects are never overwritten"""
        full_path = self.resolve(path)
        if os.path.exists(full_path):
            raise StorageError(f"The resource already exists: {self.bucket}/{path}")

        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        file.save(full_path)
        logger.info(f"Stored object {self.bucket}/{path}")
        return path

    def get_public_url(self, path: str) -> str:
        return f"{self.public_base_url}/{self.bucket}/{quote(path)}"

    def evidence_path(self, report_id: str, filename: str) -> str:
        """Object path for an evidence file, namespaced by its report"""
        if not is_safe_object_name(filename):
            raise StorageError(f"Invalid file name: {filename!r}")
        return f"{report_id}/{filename}"

    def upload_evidence_files(self, report_id: str, files, uploaded_by: str) -> list:
        """
        Upload every file for a report concurrently and wait for all of them.

        Returns one evidence row per file, in input order. The first failed
        upload is re-raised after the remaining uploads have finished.
        """
        def _upload_one(file):
            path = self.evidence_path(report_id, file.filename)
            self.upload(path, file)
            return {
                "report_id": report_id,
                "file_url": self.get_public_url(path),
                "file_type": file.mimetype or None,
                "uploaded_by": uploaded_by,
            }

        files = list(files)
        if not files:
            return []

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(files))) as executor:
            futures = [executor.submit(_upload_one, file) for file in files]

        # Executor exit waits for every upload; result() re-raises failures in order
        return [future.result() for future in futures]
