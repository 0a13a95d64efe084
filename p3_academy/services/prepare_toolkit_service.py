"""
Study plans, company research and generated preparation material for the
Prepare module.

Study plans and company research fall back to templates when no AI provider
answers. Generated resources have no template, so an outage surfaces as 503.
"""
import logging
import math
import re
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from p3_academy.core.languages import get_language_instructions
from p3_academy.models.prepare import AiPrepareSession, CompanyResearch, PreparationResource, StudyPlan
from p3_academy.schemas.prepare import ResourceGenerate, StudyPlanCreate
from p3_academy.services.ai_router import AIServiceUnavailable, ai_router
from p3_academy.services.openai_service import parse_json_content
from p3_academy.services.session_management import as_utc, utcnow

logger = logging.getLogger(__name__)

DEFAULT_DAYS_UNTIL_INTERVIEW = 14
RESEARCH_FRESH_DAYS = 7

RESOURCE_INSTRUCTIONS = {
    "article": "Write a detailed article with practical tips and examples.",
    "template": "Provide a structured template that users can fill out.",
    "checklist": "Create a comprehensive checklist with actionable items.",
    "example": "Provide detailed examples with explanations.",
}

STUDY_PLAN_PROMPT = """Generate a comprehensive interview preparation study plan for:

Position: {job_position}
{company_line}Days until interview: {days_until_interview}
Daily time available: {time_available} minutes
{focus_line}
Please provide a JSON response with the following structure:
{{
  "totalWeeks": number,
  "targetSkills": ["skill1", "skill2"],
  "milestones": [
    {{"week": number, "title": "string", "description": "string", "tasks": ["task1"], "estimatedHours": number}}
  ],
  "content": {{
    "overview": "string",
    "keyStrategies": ["strategy1"],
    "dailyRoutine": "string",
    "resources": ["resource1"]
  }}
}}

Focus on practical, actionable steps that will help the candidate prepare effectively for their interview."""

COMPANY_RESEARCH_PROMPT = """Provide comprehensive research about {company_name}{position_suffix}.

Please provide a JSON response with the following structure:
{{
  "industry": "string",
  "description": "string",
  "keyProducts": ["product1"],
  "recentNews": [{{"title": "string", "summary": "string", "date": "string"}}],
  "culture": {{"values": ["value1"], "workEnvironment": "string", "benefits": ["benefit1"]}},
  "competitors": ["competitor1"],
  "industryTrends": ["trend1"],
  "interviewInsights": {{
    "commonQuestions": ["question1"],
    "interviewProcess": "string",
    "whatTheyLookFor": ["trait1"]
  }}
}}

Focus on information that would be valuable for interview preparation."""


def days_until(interview_date: Optional[date], today: Optional[date] = None) -> int:
    if interview_date is None:
        return DEFAULT_DAYS_UNTIL_INTERVIEW
    today = today or utcnow().date()
    return max((interview_date - today).days, 1)


def fallback_study_plan(job_position: str, days_until_interview: int, time_available: int) -> Dict[str, Any]:
    total_weeks = max(1, math.ceil(days_until_interview / 7))
    return {
        "totalWeeks": total_weeks,
        "targetSkills": [
            "STAR method mastery",
            "Behavioral storytelling",
            "Company research",
            "Technical preparation",
            "Communication skills",
        ],
        "milestones": [
            {
                "week": 1,
                "title": "Foundation Building",
                "description": "Master the fundamentals and research the company",
                "tasks": [
                    "Complete STAR method training",
                    "Research company background and culture",
                    "Identify 5-7 key stories for behavioral questions",
                    "Practice common interview questions",
                ],
                "estimatedHours": round(time_available * 7 / 60, 1),
            }
        ],
        "content": {
            "overview": f"Structured {total_weeks}-week preparation plan for {job_position} interview",
            "keyStrategies": [
                "Practice STAR method responses",
                "Research company and industry trends",
                "Prepare thoughtful questions to ask",
                "Practice with mock interviews",
            ],
            "dailyRoutine": "Dedicate time to skill building, company research, and practice sessions",
            "resources": [
                "STAR method templates",
                "Company research guides",
                "Practice questions database",
                "Mock interview sessions",
            ],
        },
    }


def fallback_company_research(company_name: str) -> Dict[str, Any]:
    return {
        "industry": "Technology",
        "description": f"{company_name} is a company in the technology sector.",
        "keyProducts": ["Research required"],
        "recentNews": [],
        "culture": {
            "values": ["Innovation", "Excellence", "Collaboration"],
            "workEnvironment": "Professional",
            "benefits": ["Research required"],
        },
        "competitors": [],
        "industryTrends": [],
        "interviewInsights": {
            "commonQuestions": [
                "Why do you want to work here?",
                "What do you know about our company?",
                "How would you contribute to our team?",
            ],
            "interviewProcess": "Standard interview process",
            "whatTheyLookFor": ["Skills match", "Cultural fit", "Growth potential"],
        },
    }


def _list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


class PrepareToolkitService:
    async def _ask_json(self, prompt: str, system: str, domain: str, max_tokens: int, temperature: float) -> Dict[str, Any]:
        response = await ai_router.generate_response(
            [{"role": "system", "content": system}, {"role": "user", "content": prompt}],
            max_tokens=max_tokens,
            temperature=temperature,
            domain=domain,
        )
        parsed = parse_json_content(response.content)
        if not isinstance(parsed, dict):
            raise ValueError("Expected a JSON object")
        return parsed

    async def generate_study_plan(self, db: Session, session: AiPrepareSession, plan_in: StudyPlanCreate) -> StudyPlan:
        job_position = plan_in.job_position or session.job_position
        company_name = plan_in.company_name or session.company_name
        days = days_until(plan_in.interview_date)
        prompt = STUDY_PLAN_PROMPT.format(
            job_position=job_position,
            company_line=f"Company: {company_name}\n" if company_name else "",
            days_until_interview=days,
            time_available=plan_in.time_available,
            focus_line=f"Focus areas: {', '.join(plan_in.focus_areas)}\n" if plan_in.focus_areas else "",
        )
        if plan_in.language and plan_in.language != "en":
            prompt += f"\n\n{get_language_instructions(plan_in.language)}"

        try:
            data = await self._ask_json(
                prompt,
                "You are an expert interview preparation coach. Generate comprehensive, personalized study plans "
                "that help candidates succeed in interviews.",
                domain="study-plan",
                max_tokens=2000,
                temperature=0.7,
            )
            ai_generated = True
        except (AIServiceUnavailable, ValueError) as e:
            logger.warning(f"Study plan generation failed, using template: {str(e)}")
            data = fallback_study_plan(job_position, days, plan_in.time_available)
            ai_generated = False

        try:
            total_weeks = max(1, int(data.get("totalWeeks")))
        except (TypeError, ValueError):
            total_weeks = max(1, math.ceil(days / 7))

        origin = "AI-generated" if ai_generated else "Template-based"
        plan = StudyPlan(
            session_id=session.id,
            title=f"{job_position} Interview Preparation Plan",
            description=(
                f"{origin} study plan for {job_position} interview preparation"
                + (f" at {company_name}" if company_name else "")
            ),
            total_weeks=total_weeks,
            target_skills=_list(data.get("targetSkills")),
            daily_time_commitment=plan_in.time_available,
            milestones=_list(data.get("milestones")),
            generated_content=data.get("content") if isinstance(data.get("content"), dict) else None,
            ai_generated=ai_generated,
        )
        db.add(plan)
        db.commit()
        db.refresh(plan)
        logger.info(f"Study plan {plan.id} created for prepare session {session.id}")
        return plan

    def get_study_plan(self, db: Session, plan_id: int, user_id: int) -> StudyPlan:
        plan = db.query(StudyPlan).filter(StudyPlan.id == plan_id).first()
        if not plan:
            raise HTTPException(status_code=404, detail="Study plan not found")
        if plan.session.user_id != user_id:
            raise HTTPException(status_code=403, detail="Not authorized to access this study plan")
        return plan

    def find_company_research(self, db: Session, user_id: int, company_name: str) -> Optional[CompanyResearch]:
        return (
            db.query(CompanyResearch)
            .filter(CompanyResearch.user_id == user_id, CompanyResearch.company_name == company_name)
            .order_by(CompanyResearch.id.desc())
            .first()
        )

    def is_recent(self, research: CompanyResearch) -> bool:
        updated = as_utc(research.last_updated)
        return updated is not None and utcnow() - updated < timedelta(days=RESEARCH_FRESH_DAYS)

    async def generate_company_research(
        self, db: Session, user_id: int, company_name: str, job_position: Optional[str] = None
    ) -> CompanyResearch:
        """
        Research a company for interview preparation.

        Research younger than a week is returned as is; older research is refreshed in place.
        """
        existing = self.find_company_research(db, user_id, company_name)
        if existing is not None and self.is_recent(existing):
            return existing

        prompt = COMPANY_RESEARCH_PROMPT.format(
            company_name=company_name,
            position_suffix=f" for a {job_position} interview" if job_position else "",
        )
        try:
            data = await self._ask_json(
                prompt,
                "You are a professional research assistant specializing in company analysis for interview "
                "preparation. Provide comprehensive, accurate, and up-to-date information about companies.",
                domain="company-research",
                max_tokens=3000,
                temperature=0.3,
            )
            ai_generated = True
        except (AIServiceUnavailable, ValueError) as e:
            logger.warning(f"Company research for {company_name} failed, using template: {str(e)}")
            data = fallback_company_research(company_name)
            ai_generated = False

        research = existing or CompanyResearch(user_id=user_id, company_name=company_name)
        research.industry = str(data.get("industry") or "Unknown")[:100]
        research.description = data.get("description")
        research.key_products = _list(data.get("keyProducts"))
        research.culture = data.get("culture") if isinstance(data.get("culture"), dict) else None
        research.competitors = _list(data.get("competitors"))
        research.industry_trends = _list(data.get("industryTrends"))
        research.recent_news = _list(data.get("recentNews"))
        research.interview_insights = (
            data.get("interviewInsights") if isinstance(data.get("interviewInsights"), dict) else None
        )
        research.ai_generated = ai_generated
        research.last_updated = utcnow()
        if existing is None:
            db.add(research)
        db.commit()
        db.refresh(research)
        return research

    def get_company_research(self, db: Session, user_id: int, company_name: str) -> CompanyResearch:
        research = self.find_company_research(db, user_id, company_name)
        if not research:
            raise HTTPException(status_code=404, detail="Company research not found")
        return research

    async def generate_resource(self, db: Session, user_id: int, resource_in: ResourceGenerate) -> PreparationResource:
        stage = f" for {resource_in.interview_stage} interviews" if resource_in.interview_stage else ""
        prompt = (
            f"Create a comprehensive {resource_in.resource_type} about {resource_in.topic}{stage}.\n\n"
            f"{RESOURCE_INSTRUCTIONS[resource_in.resource_type]}\n\n"
            "Make it practical, actionable, and focused on interview preparation success."
        )
        if resource_in.language != "en":
            prompt += f"\n\n{get_language_instructions(resource_in.language)}"

        response = await ai_router.generate_response(
            [
                {
                    "role": "system",
                    "content": "You are an expert interview preparation content creator. "
                    "Generate high-quality, actionable preparation materials.",
                },
                {"role": "user", "content": prompt},
            ],
            max_tokens=2000,
            temperature=0.6,
            domain="resource-generation",
            language=resource_in.language,
        )

        content = response.content.strip()
        resource = PreparationResource(
            title=f"{resource_in.topic} - {resource_in.resource_type}",
            resource_type=resource_in.resource_type,
            category=re.sub(r"\s+", "-", resource_in.topic.strip().lower()),
            interview_stage=resource_in.interview_stage,
            content=content,
            language=resource_in.language,
            tags=[resource_in.topic, resource_in.resource_type],
            estimated_read_time=max(1, math.ceil(len(content) / 1000)),
            created_by=user_id,
        )
        db.add(resource)
        db.commit()
        db.refresh(resource)
        logger.info(f"Generated {resource.resource_type} resource {resource.id} via {response.provider}")
        return resource

    def list_resources(
        self,
        db: Session,
        category: Optional[str] = None,
        interview_stage: Optional[str] = None,
        resource_type: Optional[str] = None,
        language: Optional[str] = None,
    ) -> List[PreparationResource]:
        query = db.query(PreparationResource).filter(PreparationResource.is_active.is_(True))
        if category:
            query = query.filter(PreparationResource.category == category)
        if interview_stage:
            query = query.filter(PreparationResource.interview_stage == interview_stage)
        if resource_type:
            query = query.filter(PreparationResource.resource_type == resource_type)
        if language:
            query = query.filter(PreparationResource.language == language)
        return query.order_by(PreparationResource.id.desc()).all()


prepare_toolkit_service = PrepareToolkitService()
