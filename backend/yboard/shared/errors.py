# yboard/shared/errors.py
"""
Taxonomie d'erreurs métier.

Les services lèvent ces exceptions, les routers les traduisent en
HTTPException via to_http(). Chaque erreur porte un `code` stable
(consommé par le front) et un message lisible.
"""
from fastapi import HTTPException, status


class YBoardError(Exception):
    code = "YBOARD_ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context = context


class ValidationFailed(YBoardError):
    """Entrée invalide, détectée avant toute écriture."""
    code = "VALIDATION"
    http_status = status.HTTP_400_BAD_REQUEST


class TransitionForbidden(ValidationFailed):
    """potential/selected → ongoing : ongoing est un historique immuable."""
    code = "TRANSITION_FORBIDDEN"


class Conflict(YBoardError):
    code = "CONFLICT"
    http_status = status.HTTP_409_CONFLICT


class NotFound(YBoardError):
    code = "NOT_FOUND"
    http_status = status.HTTP_404_NOT_FOUND


class TransitionIncomplete(YBoardError):
    """
    Le déplacement n'a pu être ni terminé ni annulé :
    la relation peut avoir disparu des deux états.
    """
    code = "TRANSITION_INCOMPLETE"


class Unauthorized(YBoardError):
    code = "UNAUTHORIZED"
    http_status = status.HTTP_401_UNAUTHORIZED


def to_http(exc: YBoardError) -> HTTPException:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return HTTPException(
        status_code=exc.http_status,
        detail={"code": exc.code, "message": exc.message},
        headers=headers,
    )
