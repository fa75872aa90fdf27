import logging

from fastapi import APIRouter, File, HTTPException, UploadFile
from pdfplumber.utils.exceptions import PdfminerException

from applyly.core.config import MAX_UPLOAD_BYTES
from applyly.core.resume_parser import UnsupportedFormatError, ensure_supported, parse_resume
from applyly.core.schemas import ResumeData

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])


@router.post(
    "/parse",
    response_model=ResumeData,
    response_model_by_alias=True,
    summary="Parse Resume",
    description="Extract a structured resume (contact details, experience, education, publications, skills, ...) from a PDF file.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {
                "application/json": {
                    "example": {
                        "personalInfo": {
                            "firstName": "Jane",
                            "lastName": "Doe",
                            "email": "jane.doe@example.com",
                            "phone": "(555) 123-4567",
                            "address": "San Francisco, CA",
                        },
                        "workExperience": [
                            {
                                "title": "Software Engineer",
                                "company": "Acme Inc",
                                "dates": {"startMonth": "", "startYear": "2019", "endMonth": "", "endYear": "2021"},
                                "present": False,
                            }
                        ],
                        "skills": ["Python", "SQL", "Leadership"],
                    }
                }
            },
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Unsupported file format (PDF only)"},
        422: {"description": "PDF could not be decoded"},
    },
)
async def parse_resume_upload(
    file: UploadFile = File(..., description="Resume file (PDF format)")
):
    """
    Parse a resume PDF into structured data.

    **Supported formats:**
    - PDF (.pdf) - text-layer extraction only, OCR not supported

    **Returns:** the resume record in camelCase JSON (personalInfo,
    workExperience, education, leadershipExperience, awards, publications,
    grants, teachingExperience, conferences, skills).
    """
    filename = file.filename or ""
    try:
        ensure_supported(filename)
    except UnsupportedFormatError as exc:
        raise HTTPException(status_code=415, detail=str(exc)) from exc

    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File exceeds {MAX_UPLOAD_BYTES} bytes.")

    try:
        return parse_resume(filename, raw)
    except PdfminerException as exc:
        logger.debug(f"PDF decode failed for {filename!r}: {exc}")
        raise HTTPException(status_code=422, detail=str(exc)) from exc
