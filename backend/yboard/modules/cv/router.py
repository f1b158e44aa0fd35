# modules/cv/router.py
"""
Endpoints CV (PDF uniquement, 5 Mo maximum).
"""
from fastapi import APIRouter, Depends, File, UploadFile, Response, status

from yboard.modules.cv.service import CvService
from yboard.modules.cv.schemas import CvUploadedOut, CvDeletedOut
from yboard.shared.deps import DbDep, get_current_user
from yboard.shared.errors import YBoardError, to_http

router = APIRouter(prefix="/cv", tags=["CV"], dependencies=[Depends(get_current_user)])
service = CvService()


@router.post("/{teacher_id}", response_model=CvUploadedOut, status_code=status.HTTP_201_CREATED)
async def upload_cv(teacher_id: int, db: DbDep, file: UploadFile = File(...)):
    content = await file.read()
    try:
        filename = await service.upload(db, teacher_id, content, file.content_type)
    except YBoardError as e:
        raise to_http(e)
    return {"success": True, "filename": filename}


@router.get("/file/{filename}", summary="CV servi en ligne (application/pdf)")
async def fetch_cv(filename: str):
    try:
        content = service.fetch(filename)
    except YBoardError as e:
        raise to_http(e)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{filename}"'},
    )


@router.delete("/{teacher_id}", response_model=CvDeletedOut)
async def delete_cv(teacher_id: int, db: DbDep):
    try:
        filename = await service.delete(db, teacher_id)
    except YBoardError as e:
        raise to_http(e)
    return {"success": True, "deleted_filename": filename}
