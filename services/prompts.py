# FILE: services/prompts.py


RESUME_ANALYSIS_PROMPT = """
Please analyze the following resume and provide a comprehensive evaluation in JSON format:

Resume Text:
{resume_text}
{job_section}
Please provide your analysis in the following JSON structure:
{{
  "overallScore": number (1-100),
  "summary": "Brief summary of the candidate",
  "strengths": ["strength1", "strength2", ...],
  "weaknesses": ["weakness1", "weakness2", ...],
  "skills": {{
    "technical": ["skill1", "skill2", ...],
    "soft": ["skill1", "skill2", ...]
  }},
  "experience": {{
    "totalYears": number,
    "companies": ["company1", "company2", ...],
    "positions": ["position1", "position2", ...]
  }},
  "education": {{
    "degree": "highest degree",
    "institution": "institution name",
    "field": "field of study"
  }},
  "recommendations": [
    {{
      "category": "category name",
      "suggestion": "specific suggestion"
    }}
  ],
  "keywordMatch": {{
    "score": number (1-100),
    "missingKeywords": ["keyword1", "keyword2", ...]
  }}
}}

Make sure the response is valid JSON only, no additional text.
""".strip()


ANSWER_SCORING_PROMPT = """
You are an AI interviewer.
The candidate answered the question: "{question}"
with this response: "{answer}"
and code : "{code}".

Evaluate the answer briefly and give:
1. A score out of 10 (as a number only).
2. A short constructive feedback (5-6 words only).

Return your response in **strict JSON format** like this:
{{
  "feedback": "Good clarity but lacks depth",
  "marks": 7
}}
""".strip()


QUESTION_GENERATION_PROMPT = """
Generate comprehensive interview questions based on these skills:

Technical Skills: {technical_skills}
Soft Skills: {soft_skills}

Please provide interview questions in the following JSON format:
[
  {{
    "category": "Technical Questions",
    "questions": [
      {{
        "question": "specific technical question",
        "tip": "brief tip for answering",
        "skills": ["relevant skill 1", "relevant skill 2"]
      }}
    ]
  }},
  {{
    "category": "Behavioral Questions",
    "questions": [
      {{
        "question": "behavioral question about soft skills",
        "tip": "brief tip for answering",
        "skills": ["relevant soft skill"]
      }}
    ]
  }},
  {{
    "category": "Situational Questions",
    "questions": [
      {{
        "question": "scenario-based question",
        "tip": "brief tip for answering",
        "skills": ["relevant skill"]
      }}
    ]
  }}
]

Generate 6 Technical Questions of which 2 are DSA questions,
2 Behavioral Questions and 2 Situational Questions. Make questions specific to the provided skills.
Return only valid JSON.
""".strip()


def resume_analysis_prompt(resume_text: str, job_description: str = "") -> str:
    job_section = ""
    if job_description:
        # Lets the model fill keywordMatch against a real posting.
        job_section = f"\nJob Description:\n{job_description}\n"
    return RESUME_ANALYSIS_PROMPT.format(resume_text=resume_text, job_section=job_section)


def answer_scoring_prompt(question: str, answer: str, code: str = "") -> str:
    return ANSWER_SCORING_PROMPT.format(question=question or "", answer=answer, code=code or "")


def question_generation_prompt(technical_skills, soft_skills) -> str:
    return QUESTION_GENERATION_PROMPT.format(
        technical_skills=", ".join(technical_skills),
        soft_skills=", ".join(soft_skills),
    )
