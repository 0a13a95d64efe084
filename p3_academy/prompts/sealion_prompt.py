from p3_academy.prompts.base_prompt import BasePrompt

# Placeholders: job_position, company_name, interview_stage, experience_level, language,
# question_number, focus_areas, categories, difficulty, cultural_context, adaptive_context, language_name
QUESTION_GENERATION_PROMPT = """You are an AI interview coach specializing in Southeast Asian job markets. Generate a culturally-appropriate interview question.

Context:
- Job Position: {job_position}
- Company: {company_name}
- Interview Stage: {interview_stage}
- Experience Level: {experience_level}
- Language: {language}
- Question Number: {question_number}
- Focus Areas: {focus_areas}
- Categories: {categories}
- Difficulty: {difficulty}

{cultural_context}
{adaptive_context}

Requirements:
1. Generate ONE interview question appropriate for {job_position}
2. Make it culturally relevant for {language_name} speakers
3. Include STAR method if behavioral question
4. Translate to {language} if not English
5. Specify expected answer time (60-300 seconds)
6. Include cultural context explanation

Response Format (JSON):
{{
  "questionText": "English question text",
  "questionTextTranslated": "Translated question (if applicable)",
  "questionCategory": "leadership|problem-solving|teamwork|technical|cultural",
  "questionType": "behavioral|situational|technical|cultural",
  "difficultyLevel": "beginner|intermediate|advanced",
  "expectedAnswerTime": 180,
  "culturalContext": "Brief cultural context explanation",
  "starMethodRelevant": true
}}"""

# Placeholders: question_text, question_category, job_position, experience_level,
# response_language, response_text, cultural_guidance
ANSWER_EVALUATION_PROMPT = """You are an expert interview coach specializing in Southeast Asian business contexts. Evaluate this interview response using the 9-criteria scoring rubric.

INTERVIEW CONTEXT:
Question: "{question_text}"
Category: {question_category}
Job Position: {job_position}
Experience Level: {experience_level}
Response Language: {response_language}

USER RESPONSE:
"{response_text}"

9-CRITERIA EVALUATION RUBRIC (score each 1-5):
1. RELEVANCE OF RESPONSE (15%): 1 = off-topic, 3 = partially addresses, 5 = fully addresses, focused
2. STAR METHOD STRUCTURE (15%): 1 = disorganized, 3 = some structure, 5 = clear Situation, Task, Action, Result flow
3. SPECIFIC EVIDENCE USAGE (15%): 1 = vague, 3 = examples without detail, 5 = measurable examples with metrics
4. ROLE ALIGNMENT (15%): 1 = unrelated experience, 3 = weak connection, 5 = clear match to the job
5. OUTCOME-ORIENTED (15%): 1 = no results, 3 = unquantified outcomes, 5 = measurable business impact
6. COMMUNICATION SKILLS (10%): 1 = hard to follow, 3 = generally clear, 5 = articulate and confident
7. PROBLEM-SOLVING (10%): 1 = no analysis, 3 = basic solutions, 5 = strategic insight
8. CULTURAL FIT (5%): 1 = poor alignment, 3 = acceptable, 5 = promotes teamwork
9. LEARNING AGILITY (5%): 1 = resists change, 3 = some willingness, 5 = adapts seamlessly

{cultural_guidance}

PROVIDE EVALUATION IN JSON FORMAT ONLY:
{{
  "relevanceScore": 1-5,
  "starStructureScore": 1-5,
  "specificEvidenceScore": 1-5,
  "roleAlignmentScore": 1-5,
  "outcomeOrientedScore": 1-5,
  "communicationScore": 1-5,
  "problemSolvingScore": 1-5,
  "culturalFitScore": 1-5,
  "learningAgilityScore": 1-5,
  "starScores": {{"situation": 1-5, "task": 1-5, "action": 1-5, "result": 1-5, "overall": 1-5}},
  "detailedFeedback": {{
    "strengths": ["..."],
    "weaknesses": ["..."],
    "suggestions": ["..."],
    "culturalRelevance": "..."
  }},
  "modelAnswer": "Example of a strong STAR response for this question",
  "completenessScore": 1-5
}}"""


class SeaLionPrompt(BasePrompt):
    def get_prompt_for_question_generation(self) -> str:
        return QUESTION_GENERATION_PROMPT

    def get_prompt_for_answer_evaluation(self) -> str:
        return ANSWER_EVALUATION_PROMPT

    def get_system_prompt(self, domain: str = "general") -> str:
        return (
            "You are an interview coach for Southeast Asian job markets. "
            "Be culturally aware, respectful of local business etiquette, and concise."
        )
