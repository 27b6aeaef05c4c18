import logging
from typing import TypedDict, List, Optional

from langgraph.graph import StateGraph, START, END

from ..schemas.resume import WorkHistoryEntry
from ..services.generation import GenerationClient
from .prompts import (
    format_work_history,
    objective_prompt,
    keypoints_prompt,
    job_responsibilities_prompt,
)

logger = logging.getLogger(__name__)


class ResumeGenerationState(TypedDict, total=False):
    full_name: Optional[str]
    current_position: Optional[str]
    current_length: Optional[str]
    technologies: Optional[str]
    work_history: List[WorkHistoryEntry]
    objective: str
    keypoints: str
    job_responsibilities: str


def build_resume_graph(generation_client: GenerationClient):
    """
    Factory function to build the compiled resume generation graph.

    The three generation nodes share no data, so they all hang off START and
    run concurrently; the graph run fails as a whole if any of them fails.
    """

    async def objective_node(state: ResumeGenerationState) -> dict:
        prompt = objective_prompt(
            state["full_name"],
            state["current_position"],
            state["current_length"],
            state["technologies"],
        )
        logger.info("Node: `objective_node` - generating resume introduction")
        return {"objective": await generation_client.generate(prompt)}

    async def keypoints_node(state: ResumeGenerationState) -> dict:
        prompt = keypoints_prompt(
            state["full_name"],
            state["current_position"],
            state["current_length"],
            state["technologies"],
        )
        logger.info("Node: `keypoints_node` - generating soft skills list")
        return {"keypoints": await generation_client.generate(prompt)}

    async def job_responsibilities_node(state: ResumeGenerationState) -> dict:
        work_history = state["work_history"]
        prompt = job_responsibilities_prompt(
            state["full_name"],
            state["current_position"],
            format_work_history(work_history),
            len(work_history),
        )
        logger.info("Node: `job_responsibilities_node` - generating per-company achievements")
        return {"job_responsibilities": await generation_client.generate(prompt)}

    workflow = StateGraph(ResumeGenerationState)

    workflow.add_node("objective", objective_node)
    workflow.add_node("keypoints", keypoints_node)
    workflow.add_node("job_responsibilities", job_responsibilities_node)

    for node in ("objective", "keypoints", "job_responsibilities"):
        workflow.add_edge(START, node)
        workflow.add_edge(node, END)

    return workflow.compile()
