"""
Prompts and output schema shared by every backend.
"""

import json

TASK_PROMPT = """You are an AI-powered Career Assistant and CV Analyzer.

Your task is to take a user's CV, a list of job postings, and filters, and return a comprehensive analysis in JSON format.

You must:

1. Parse the CV to extract skills, experience, education, and job titles.

2. Compare the CV against EACH job in the provided job list.

3. For each job, calculate a 'suitabilityPercentage' (0-100) based on how well the CV matches the job's 'title', 'description', and 'requirements'.

4. Perform an in-depth analysis of the CV itself, identifying strengths, weaknesses, extracted skills, and suggesting 3-5 specific skills to learn.

"""

# Used where the schema is attached as a structured constraint
SYSTEM_PROMPT = TASK_PROMPT + "5. Return a single JSON object matching the provided schema exactly."

# Prose version of RESPONSE_SCHEMA for providers without schema support
SCHEMA_INSTRUCTIONS = """Return ONLY valid JSON matching this exact schema:
{
  "jobMatches": [
    {
      "id": "string",
      "title": "string",
      "company": "string",
      "location": {
        "name": "string",
        "lat": number,
        "lng": number
      },
      "salary": "string",
      "type": "string",
      "suitabilityPercentage": number
    }
  ],
  "cvAnalysis": {
    "strengths": ["string"],
    "weaknesses": ["string"],
    "extractedSkills": ["string"],
    "suggestedSkillsToLearn": ["string"]
  }
}"""

SCHEMA_SYSTEM_PROMPT = TASK_PROMPT + "5. " + SCHEMA_INSTRUCTIONS

JSON_ONLY_REMINDER = "Return ONLY valid JSON without any markdown formatting or code blocks."

JOB_MATCH_FIELDS = ["id", "title", "company", "location", "salary", "type", "suitabilityPercentage"]
CV_ANALYSIS_FIELDS = ["strengths", "weaknesses", "extractedSkills", "suggestedSkillsToLearn"]

_STRING_LIST = {"type": "ARRAY", "items": {"type": "STRING"}}

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "jobMatches": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "id": {"type": "STRING"},
                    "title": {"type": "STRING"},
                    "company": {"type": "STRING"},
                    "location": {
                        "type": "OBJECT",
                        "properties": {
                            "name": {"type": "STRING"},
                            "lat": {"type": "NUMBER"},
                            "lng": {"type": "NUMBER"},
                        },
                    },
                    "salary": {"type": "STRING"},
                    "type": {"type": "STRING"},
                    "suitabilityPercentage": {"type": "NUMBER"},
                },
                "required": JOB_MATCH_FIELDS,
            },
        },
        "cvAnalysis": {
            "type": "OBJECT",
            "properties": {name: _STRING_LIST for name in CV_ANALYSIS_FIELDS},
            "required": CV_ANALYSIS_FIELDS,
        },
    },
    "required": ["jobMatches", "cvAnalysis"],
}


def _dumps(value) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def build_user_prompt(resume_text: str, jobs: list[dict], filters: dict, reminder: str = "") -> str:
    """User-facing instruction with the CV, jobs and filters embedded."""
    prompt = f"""Please analyze the following CV and job list.

--- CV TEXT ---
{resume_text}

--- JOB LIST ---
{_dumps(jobs)}

--- FILTERS ---
{_dumps(filters)}
"""
    if reminder:
        prompt += f"\n{reminder}"
    return prompt
