from pydantic import BaseModel, ConfigDict
from typing import Optional, List, Dict, Any


class WorkHistoryEntry(BaseModel):
    # callers may send extra fields; they are kept and echoed back untouched
    model_config = ConfigDict(extra="allow")

    # values are interpolated as given, whatever their JSON type
    name: Any = None
    position: Any = None


class ApplicantContext(BaseModel):
    applicant_name: Optional[str] = None
    technologies: Optional[str] = None
    work_history: List[WorkHistoryEntry] = []


class ResumeRecord(BaseModel):
    id: str
    fullName: Optional[str]
    image_url: str
    currentPosition: Optional[str]
    currentLength: Optional[str]
    currentTechnologies: Optional[str]
    workHistory: List[Dict[str, Any]]
    objective: str
    keypoints: str
    jobResponsibilities: str


class ResumeCreateResponse(BaseModel):
    message: str
    session_id: str
    data: ResumeRecord


class CoverLetter(BaseModel):
    cover_letter: str
    recruiter_email: Optional[str]
    my_email: Optional[str]
    applicant_name: Optional[str]
    resume: str


class CoverLetterResponse(BaseModel):
    message: str
    data: CoverLetter


class MessageResponse(BaseModel):
    message: str
