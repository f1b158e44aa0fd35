# yboard/modules/cv/schemas.py
from pydantic import BaseModel


class CvUploadedOut(BaseModel):
    success: bool = True
    filename: str


class CvDeletedOut(BaseModel):
    success: bool = True
    deleted_filename: str
