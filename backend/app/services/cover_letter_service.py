import logging
from typing import Optional

from ..schemas.resume import CoverLetter
from ..workflows.prompts import cover_letter_prompt, format_work_history
from .generation import GenerationClient

logger = logging.getLogger(__name__)


class CoverLetterAssembler:
    def __init__(self, generation_client: GenerationClient, context_store):
        self.generation_client = generation_client
        self.context_store = context_store

    async def create_cover_letter(
        self,
        session_id: Optional[str],
        applicant_name: Optional[str],
        recruiter_name: Optional[str],
        job_title: Optional[str],
        my_email: Optional[str],
        recruiter_email: Optional[str],
        company_name: Optional[str],
        company_description: Optional[str],
        resume_url: str,
    ) -> CoverLetter:
        """
        Work history and technologies come from the applicant context stored
        by resume creation under `session_id`, not from this request.
        """
        context = await self.context_store.load(session_id)

        prompt = cover_letter_prompt(
            applicant_name,
            company_name,
            company_description,
            job_title,
            format_work_history(context.work_history),
            context.technologies,
            recruiter_name,
        )
        cover_letter = await self.generation_client.generate(prompt)

        logger.info(f"Cover letter generated for session {session_id}")
        return CoverLetter(
            cover_letter=cover_letter,
            recruiter_email=recruiter_email,
            my_email=my_email,
            applicant_name=applicant_name,
            resume=resume_url,
        )
