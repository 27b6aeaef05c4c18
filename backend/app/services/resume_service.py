import logging
from typing import List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from ..core.errors import MalformedInputError
from ..schemas.resume import ApplicantContext, ResumeRecord, WorkHistoryEntry
from ..utils.identifiers import generate_id
from ..workflows.resume_graph import build_resume_graph
from .generation import GenerationClient
from .record_store import RecordStore

logger = logging.getLogger(__name__)

_work_history_adapter = TypeAdapter(List[WorkHistoryEntry])


def parse_work_history(work_history_json: Optional[str]) -> List[WorkHistoryEntry]:
    """
    Decode the string-encoded work history array.
    Entries are kept in order and are not deduplicated.
    """
    if work_history_json is None:
        raise MalformedInputError("workHistory is required")
    try:
        return _work_history_adapter.validate_json(work_history_json)
    except ValidationError as e:
        raise MalformedInputError(
            f"workHistory must be a JSON array of objects: {e.errors()[0]['msg']}"
        ) from e


class ResumeAssembler:
    def __init__(self, generation_client: GenerationClient, record_store: RecordStore, context_store):
        self.record_store = record_store
        self.context_store = context_store
        self.graph = build_resume_graph(generation_client)

    async def create_resume(
        self,
        full_name: Optional[str],
        current_position: Optional[str],
        current_length: Optional[str],
        current_technologies: Optional[str],
        work_history_json: Optional[str],
        uploaded_file_url: str,
    ) -> Tuple[ResumeRecord, str]:
        """
        Generate the three resume sections and store the composed record.

        Returns the record and the session id under which the applicant
        context was stored for the cover-letter step. Nothing is stored when
        any generation call fails.
        """
        work_history = parse_work_history(work_history_json)

        result = await self.graph.ainvoke({
            "full_name": full_name,
            "current_position": current_position,
            "current_length": current_length,
            "technologies": current_technologies,
            "work_history": work_history,
        })

        record = ResumeRecord(
            id=generate_id(),
            fullName=full_name,
            image_url=uploaded_file_url,
            currentPosition=current_position,
            currentLength=current_length,
            currentTechnologies=current_technologies,
            workHistory=[entry.model_dump(exclude_unset=True) for entry in work_history],
            objective=result["objective"],
            keypoints=result["keypoints"],
            jobResponsibilities=result["job_responsibilities"],
        )

        session_id = await self.context_store.save(ApplicantContext(
            applicant_name=full_name,
            technologies=current_technologies,
            work_history=work_history,
        ))
        record = await self.record_store.append(record)

        logger.info(f"Resume {record.id} created; applicant context stored under session {session_id}")
        return record, session_id
