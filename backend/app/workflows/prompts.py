"""
Prompt templates for the resume and cover-letter generation calls.

Every function here is a plain string template: values are interpolated
verbatim, nothing is trimmed, escaped or defaulted.
"""
from typing import Iterable

from ..schemas.resume import WorkHistoryEntry


def format_work_history(work_history: Iterable[WorkHistoryEntry]) -> str:
    """Render entries as "<name> as a <position>." fragments joined by single spaces."""
    return " ".join(
        f"{_text(entry.name)} as a {_text(entry.position)}." for entry in work_history
    )


def _text(value) -> str:
    return "" if value is None else str(value)


def objective_prompt(full_name, current_position, current_length, technologies) -> str:
    return (
        f"I am writing a resume, my details are \n name: {full_name} \n"
        f" role: {current_position} ({current_length} years). \n"
        f" I work proficiently with these technologies: {technologies}."
        " Can you write a 100 word introduction for the top of the resume(first person writing)?"
    )


def keypoints_prompt(full_name, current_position, current_length, technologies) -> str:
    return (
        f"I am writing a resume, my details are \n name: {full_name} \n"
        f" role: {current_position} ({current_length} years). \n"
        f" I  work proficiently with these technologies: {technologies}."
        " Can you write me a list of soft skills seperated by numbers a person in this role will possess?."
        " The list should be suitable for a resume (in first person)?"
        ' Do not write "The end" at the end of the list!!!'
    )


def job_responsibilities_prompt(full_name, current_position, work_history_text, company_count) -> str:
    return (
        f"I am writing a resume, my details are \n name: {full_name} \n"
        f" role: {current_position}. \n"
        f" During my years I worked at {company_count} companies. {work_history_text} \n"
        " Can you write me 50 words for each company, pertaining to my success each company"
        "(in first person, and seperated in numbers)?"
    )


def cover_letter_prompt(
    applicant_name,
    company_name,
    company_description,
    job_title,
    work_history_text,
    technologies,
    recruiter_name,
) -> str:
    return (
        f"My name is {applicant_name}. I want to work for {company_name}, they are {company_description}\n"
        f"I am applying for the role of {job_title}. I have previously worked for: {work_history_text}\n"
        f"And I have used technologies such as {technologies}\n"
        f"I want to cold email {recruiter_name} from {applicant_name} my resume"
        " and write why I'm a phenomenal fit for the company.\n"
        "Can you please write me the email in a friendly voice, not official?"
        " without subject, maximum 300 words and say in the end that my CV is attached."
    )
