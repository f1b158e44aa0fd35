# yboard/infra/storage.py
"""
Stockage local des CV (un répertoire, un fichier PDF par dépôt).

Nom de fichier : "<teacher_id>_<millisecondes>.pdf". Toute vérification
(type, taille, nom) a lieu avant la moindre écriture disque.
"""
import os
import time
from typing import Optional

from yboard.core.config import settings
from yboard.core.logging import get_logger
from yboard.shared.errors import NotFound, ValidationFailed

logger = get_logger(__name__)


class CvStorage:

    def __init__(
        self,
        upload_dir: Optional[str] = None,
        max_bytes: Optional[int] = None,
        content_type: Optional[str] = None,
    ):
        self.upload_dir = upload_dir or settings.CV_UPLOAD_DIR
        self.max_bytes = max_bytes or settings.CV_MAX_BYTES
        self.content_type = content_type or settings.CV_CONTENT_TYPE

    def _path(self, filename: str) -> str:
        if not filename or "/" in filename or "\\" in filename or filename in (".", ".."):
            raise ValidationFailed("Nom de fichier invalide.", filename=filename)
        return os.path.join(self.upload_dir, filename)

    def store(self, teacher_id: int, content: bytes, content_type: Optional[str]) -> str:
        if content_type != self.content_type:
            raise ValidationFailed("Seuls les fichiers PDF sont acceptés.", content_type=content_type)
        if not content:
            raise ValidationFailed("Fichier vide.")
        if len(content) > self.max_bytes:
            raise ValidationFailed(
                "Fichier trop volumineux (5 Mo maximum).",
                size=len(content), max_bytes=self.max_bytes,
            )

        os.makedirs(self.upload_dir, exist_ok=True)
        filename = f"{teacher_id}_{int(time.time() * 1000)}.pdf"
        with open(self._path(filename), "wb") as buffer:
            buffer.write(content)

        logger.info("cv_stored", teacher_id=teacher_id, filename=filename, size=len(content))
        return filename

    def fetch(self, filename: str) -> bytes:
        path = self._path(filename)
        if not os.path.isfile(path):
            raise NotFound("CV introuvable.", filename=filename)
        with open(path, "rb") as f:
            return f.read()

    def delete(self, filename: str) -> None:
        path = self._path(filename)
        if not os.path.isfile(path):
            raise NotFound("CV introuvable.", filename=filename)
        os.remove(path)
        logger.info("cv_deleted", filename=filename)
