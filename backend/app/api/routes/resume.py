from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ...schemas.resume import CoverLetterResponse, ResumeCreateResponse
from ...services.cover_letter_service import CoverLetterAssembler
from ...services.resume_service import ResumeAssembler
from ..deps import get_cover_letter_assembler, get_object_store, get_resume_assembler, stored_upload

router = APIRouter(prefix="/resume", tags=["Resume"])


@router.post("/create", response_model=ResumeCreateResponse)
async def create_resume(
    headshotImage: Optional[UploadFile] = File(None),
    fullName: Optional[str] = Form(None),
    currentPosition: Optional[str] = Form(None),
    currentLength: Optional[str] = Form(None),
    currentTechnologies: Optional[str] = Form(None),
    workHistory: Optional[str] = Form(None),
    object_store=Depends(get_object_store),
    assembler: ResumeAssembler = Depends(get_resume_assembler),
):
    async with stored_upload(object_store, headshotImage, "headshotImage") as image_url:
        record, session_id = await assembler.create_resume(
            full_name=fullName,
            current_position=currentPosition,
            current_length=currentLength,
            current_technologies=currentTechnologies,
            work_history_json=workHistory,
            uploaded_file_url=image_url,
        )

    return ResumeCreateResponse(
        message="Request successful!",
            session_id=session_id,
            data=record,
    )


@router.post("/send", response_model=CoverLetterResponse)
async def send_resume(
    resume: Optional[UploadFile] = File(None),
    sessionId: Optional[str] = Form(None),
    applicantName: Optional[str] = Form(None),
    recruiterName: Optional[str] = Form(None),
    jobTitle: Optional[str] = Form(None),
    myEmail: Optional[str] = Form(None),
    recruiterEmail: Optional[str] = Form(None),
    companyName: Optional[str] = Form(None),
    companyDescription: Optional[str] = Form(None),
    object_store=Depends(get_object_store),
    assembler: CoverLetterAssembler = Depends(get_cover_letter_assembler),
):
    async with stored_upload(object_store, resume, "resume") as resume_url:
        cover_letter = await assembler.create_cover_letter(
            session_id=sessionId,
            applicant_name=applicantName,
            recruiter_name=recruiterName,
            job_title=jobTitle,
            my_email=myEmail,
            recruiter_email=recruiterEmail,
            company_name=companyName,
            company_description=companyDescription,
            resume_url=resume_url,
        )

    return CoverLetterResponse(message="Successful", data=cover_letter)
