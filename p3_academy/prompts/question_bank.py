"""Curated interview questions for the five interview stages."""

INTERVIEW_STAGES = [
    "phone-screening",
    "functional-team",
    "hiring-manager",
    "subject-matter-expertise",
    "executive-final",
]

QUESTION_CATEGORIES = ["behavioral", "situational", "technical", "company-specific", "general"]

DIFFICULTY_LEVELS = {"beginner": 1, "intermediate": 2, "advanced": 3}

STAGE_CONTEXTS = {
    "phone-screening": "Initial screening to assess basic qualifications, communication skills, and cultural fit. Focus on background, motivation, and fundamental competencies.",
    "functional-team": "Team-based interview focusing on collaboration, technical skills relevant to the role, and ability to work effectively with colleagues.",
    "hiring-manager": "Strategic interview with decision-maker focusing on leadership potential, problem-solving, and alignment with team goals and company values.",
    "subject-matter-expertise": "Deep technical or specialized knowledge assessment. Questions focus on expertise, industry knowledge, and advanced problem-solving.",
    "executive-final": "Senior-level interview focusing on strategic thinking, leadership philosophy, cultural impact, and long-term contribution to organizational success.",
}

QUESTION_BANK = {
    "phone-screening": [
        {
            "id": "ps-001",
            "question": "Tell me about yourself and why you're interested in this position.",
            "category": "general",
            "difficulty": "beginner",
            "interview_stage": "phone-screening",
            "tags": ["introduction", "motivation", "background"],
            "expected_answer_time": 3,
            "star_method_relevant": False,
            "cultural_context": "Professional introduction with emphasis on career goals",
        },
        {
            "id": "ps-002",
            "question": "What do you know about our company and why do you want to work here?",
            "category": "company-specific",
            "difficulty": "beginner",
            "interview_stage": "phone-screening",
            "tags": ["company-research", "motivation", "cultural-fit"],
            "expected_answer_time": 2,
            "star_method_relevant": False,
            "cultural_context": "Demonstrates research and genuine interest",
        },
        {
            "id": "ps-003",
            "question": "Describe a challenging situation you faced at work and how you handled it.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "phone-screening",
            "tags": ["problem-solving", "resilience", "professionalism"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Shows problem-solving approach and professionalism",
        },
        {
            "id": "ps-004",
            "question": "What are your greatest strengths and how do they relate to this role?",
            "category": "general",
            "difficulty": "beginner",
            "interview_stage": "phone-screening",
            "tags": ["strengths", "self-assessment", "role-alignment"],
            "expected_answer_time": 2,
            "star_method_relevant": False,
            "cultural_context": "Confident but humble self-presentation",
        },
        {
            "id": "ps-005",
            "question": "Tell me about a time when you had to work with a difficult colleague or customer.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "phone-screening",
            "tags": ["teamwork", "conflict-resolution", "interpersonal"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Diplomatic approach to conflict resolution",
        },
        {
            "id": "ps-006",
            "question": "Where do you see yourself in 5 years?",
            "category": "general",
            "difficulty": "beginner",
            "interview_stage": "phone-screening",
            "tags": ["career-goals", "ambition", "planning"],
            "expected_answer_time": 2,
            "star_method_relevant": False,
            "cultural_context": "Balanced ambition with commitment to growth",
        },
        {
            "id": "ps-007",
            "question": "What motivates you in your work?",
            "category": "general",
            "difficulty": "beginner",
            "interview_stage": "phone-screening",
            "tags": ["motivation", "values", "work-style"],
            "expected_answer_time": 2,
            "star_method_relevant": False,
            "cultural_context": "Personal values aligned with professional goals",
        },
        {
            "id": "ps-008",
            "question": "Describe a time when you had to learn something new quickly.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "phone-screening",
            "tags": ["learning-agility", "adaptability", "growth"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Demonstrates continuous learning mindset",
        },
        {
            "id": "ps-009",
            "question": "How do you handle stress and pressure?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "phone-screening",
            "tags": ["stress-management", "resilience", "coping"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Healthy approach to workplace pressure",
        },
        {
            "id": "ps-010",
            "question": "What are your salary expectations?",
            "category": "general",
            "difficulty": "intermediate",
            "interview_stage": "phone-screening",
            "tags": ["compensation", "negotiation", "expectations"],
            "expected_answer_time": 2,
            "star_method_relevant": False,
            "cultural_context": "Professional discussion of compensation expectations",
        },
        {
            "id": "ps-011",
            "question": "Tell me about a project you're particularly proud of.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "phone-screening",
            "tags": ["achievement", "pride", "contribution"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Highlights accomplishments with appropriate pride",
        },
        {
            "id": "ps-012",
            "question": "How do you prioritize your work when you have multiple deadlines?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "phone-screening",
            "tags": ["time-management", "prioritization", "organization"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Systematic approach to task management",
        },
        {
            "id": "ps-013",
            "question": "What questions do you have about the role or our company?",
            "category": "general",
            "difficulty": "beginner",
            "interview_stage": "phone-screening",
            "tags": ["curiosity", "engagement", "preparation"],
            "expected_answer_time": 3,
            "star_method_relevant": False,
            "cultural_context": "Shows genuine interest and preparation",
        },
        {
            "id": "ps-014",
            "question": "Describe your ideal work environment.",
            "category": "general",
            "difficulty": "beginner",
            "interview_stage": "phone-screening",
            "tags": ["work-environment", "cultural-fit", "preferences"],
            "expected_answer_time": 2,
            "star_method_relevant": False,
            "cultural_context": "Alignment with company culture and values",
        },
        {
            "id": "ps-015",
            "question": "Tell me about a time when you made a mistake and how you handled it.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "phone-screening",
            "tags": ["accountability", "learning", "integrity"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Shows accountability and learning from errors",
        },
        {
            "id": "ps-016",
            "question": "How do you stay current with industry trends and developments?",
            "category": "general",
            "difficulty": "intermediate",
            "interview_stage": "phone-screening",
            "tags": ["continuous-learning", "industry-knowledge", "professional-development"],
            "expected_answer_time": 3,
            "star_method_relevant": False,
            "cultural_context": "Commitment to professional growth and staying informed",
        },
    ],

    "functional-team": [
        {
            "id": "ft-001",
            "question": "Describe a time when you had to collaborate with multiple team members to complete a project.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["teamwork", "collaboration", "project-management"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Emphasizes team harmony and collective success",
        },
        {
            "id": "ft-002",
            "question": "How would you handle a situation where a team member is not contributing effectively?",
            "category": "situational",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["team-management", "conflict-resolution", "leadership"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Diplomatic approach respecting individual dignity",
        },
        {
            "id": "ft-003",
            "question": "Tell me about a time when you had to adapt to a significant change in your work process.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["adaptability", "change-management", "flexibility"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Shows resilience and positive attitude toward change",
        },
        {
            "id": "ft-004",
            "question": "Describe your approach to training or mentoring new team members.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["mentoring", "training", "knowledge-sharing"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Demonstrates caring and supportive leadership style",
        },
        {
            "id": "ft-005",
            "question": "How do you ensure quality in your work while meeting tight deadlines?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["quality-assurance", "time-management", "standards"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Balance between efficiency and excellence",
        },
        {
            "id": "ft-006",
            "question": "Tell me about a time when you identified and solved a process improvement opportunity.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["process-improvement", "innovation", "efficiency"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Proactive approach to continuous improvement",
        },
        {
            "id": "ft-007",
            "question": "Describe a situation where you had to communicate complex information to non-technical stakeholders.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["communication", "simplification", "stakeholder-management"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Clear communication across different backgrounds",
        },
        {
            "id": "ft-008",
            "question": "How do you handle receiving constructive criticism or feedback?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["feedback", "growth-mindset", "professionalism"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Graceful acceptance of feedback with learning focus",
        },
        {
            "id": "ft-009",
            "question": "Tell me about a time when you had to work with limited resources to achieve your goals.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["resourcefulness", "creativity", "problem-solving"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Demonstrates ingenuity and efficient resource utilization",
        },
        {
            "id": "ft-010",
            "question": "Describe your experience working in a diverse, multicultural team.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["diversity", "cultural-sensitivity", "inclusion"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Appreciation for cultural diversity and inclusive practices",
        },
        {
            "id": "ft-011",
            "question": "How do you stay organized and manage multiple competing priorities?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["organization", "priority-management", "productivity"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Systematic approach to workload management",
        },
        {
            "id": "ft-012",
            "question": "Tell me about a time when you had to take initiative on a project without being asked.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["initiative", "proactivity", "leadership"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Balance between initiative and respect for hierarchy",
        },
        {
            "id": "ft-013",
            "question": "Describe a challenging deadline you've had to meet and how you ensured success.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["deadline-management", "planning", "execution"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Commitment to meeting commitments with quality work",
        },
        {
            "id": "ft-014",
            "question": "How do you approach learning new tools or technologies required for your role?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["learning", "technology", "adaptation"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Enthusiasm for continuous learning and skill development",
        },
        {
            "id": "ft-015",
            "question": "Tell me about a time when you had to convince others to support your idea or proposal.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "functional-team",
            "tags": ["persuasion", "influence", "communication"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Respectful persuasion with data-driven arguments",
        },
    ],

    "hiring-manager": [
        {
            "id": "hm-001",
            "question": "Tell me about a time when you had to make a difficult decision with limited information.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "hiring-manager",
            "tags": ["decision-making", "judgment", "leadership"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Demonstrates sound judgment and decisive leadership",
        },
        {
            "id": "hm-002",
            "question": "Describe a situation where you had to manage conflicting priorities from different stakeholders.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "hiring-manager",
            "tags": ["stakeholder-management", "prioritization", "diplomacy"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Shows diplomatic skills in managing competing demands",
        },
        {
            "id": "hm-003",
            "question": "How do you approach setting and communicating goals for your team or projects?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "hiring-manager",
            "tags": ["goal-setting", "communication", "leadership"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Clear communication with team engagement and buy-in",
        },
        {
            "id": "hm-004",
            "question": "Tell me about a time when you had to drive change in an organization or team.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "hiring-manager",
            "tags": ["change-management", "leadership", "influence"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Respectful approach to change with stakeholder engagement",
        },
        {
            "id": "hm-005",
            "question": "Describe your approach to developing and mentoring team members.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "hiring-manager",
            "tags": ["mentoring", "development", "leadership"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Caring leadership focused on individual growth",
        },
        {
            "id": "hm-006",
            "question": "How do you handle underperformance in your team?",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "hiring-manager",
            "tags": ["performance-management", "coaching", "difficult-conversations"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Compassionate but firm approach to performance issues",
        },
        {
            "id": "hm-007",
            "question": "Tell me about a time when you had to deliver difficult news or feedback to stakeholders.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "hiring-manager",
            "tags": ["communication", "difficult-conversations", "transparency"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Honest and respectful communication of challenging information",
        },
        {
            "id": "hm-008",
            "question": "Describe a situation where you had to balance short-term pressures with long-term strategic goals.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "hiring-manager",
            "tags": ["strategic-thinking", "balance", "planning"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Strategic mindset with consideration for sustainable success",
        },
        {
            "id": "hm-009",
            "question": "How do you ensure your team remains motivated during challenging periods?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "hiring-manager",
            "tags": ["motivation", "team-morale", "leadership"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Supportive leadership that maintains team spirit",
        },
        {
            "id": "hm-010",
            "question": "Tell me about a time when you had to negotiate a complex agreement or resolution.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "hiring-manager",
            "tags": ["negotiation", "problem-solving", "diplomacy"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Win-win negotiation approach with mutual respect",
        },
        {
            "id": "hm-011",
            "question": "Describe your approach to risk assessment and management in projects.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "hiring-manager",
            "tags": ["risk-management", "planning", "analysis"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Prudent risk assessment with contingency planning",
        },
        {
            "id": "hm-012",
            "question": "How do you stay informed about industry trends and incorporate them into your work?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "hiring-manager",
            "tags": ["industry-knowledge", "continuous-learning", "innovation"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Proactive learning and adaptation to industry changes",
        },
        {
            "id": "hm-013",
            "question": "Tell me about a time when you had to build consensus among diverse stakeholders.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "hiring-manager",
            "tags": ["consensus-building", "stakeholder-management", "influence"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Inclusive approach to building agreement across differences",
        },
        {
            "id": "hm-014",
            "question": "Describe a situation where you had to pivot strategy based on changing market conditions.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "hiring-manager",
            "tags": ["adaptability", "strategic-thinking", "market-awareness"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Agile response to market changes with strategic thinking",
        },
        {
            "id": "hm-015",
            "question": "How do you ensure quality and consistency across your team's deliverables?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "hiring-manager",
            "tags": ["quality-assurance", "standards", "team-management"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Systematic approach to maintaining high standards",
        },
        {
            "id": "hm-016",
            "question": "Tell me about your experience with budget management and resource allocation.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "hiring-manager",
            "tags": ["budget-management", "resource-allocation", "financial-acumen"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Responsible stewardship of company resources",
        },
    ],

    "subject-matter-expertise": [
        {
            "id": "sme-001",
            "question": "Walk me through your approach to solving a complex technical problem in your domain.",
            "category": "technical",
            "difficulty": "advanced",
            "interview_stage": "subject-matter-expertise",
            "tags": ["problem-solving", "technical-expertise", "methodology"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Systematic and thorough technical problem-solving approach",
        },
        {
            "id": "sme-002",
            "question": "Describe a time when you had to quickly master a new technology or methodology for a project.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "subject-matter-expertise",
            "tags": ["learning-agility", "technical-adaptation", "expertise-building"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Continuous learning and professional development commitment",
        },
        {
            "id": "sme-003",
            "question": "How do you stay current with best practices and emerging trends in your field?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "subject-matter-expertise",
            "tags": ["continuous-learning", "industry-trends", "professional-development"],
            "expected_answer_time": 3,
            "star_method_relevant": False,
            "cultural_context": "Commitment to staying at forefront of professional knowledge",
        },
        {
            "id": "sme-004",
            "question": "Tell me about a time when you had to debug or troubleshoot a particularly challenging issue.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "subject-matter-expertise",
            "tags": ["troubleshooting", "debugging", "analytical-thinking"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Methodical approach to problem-solving with persistence",
        },
        {
            "id": "sme-005",
            "question": "Describe your experience with [specific technology/methodology relevant to role].",
            "category": "technical",
            "difficulty": "advanced",
            "interview_stage": "subject-matter-expertise",
            "tags": ["specific-expertise", "hands-on-experience", "technical-depth"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Deep technical knowledge with practical application experience",
        },
        {
            "id": "sme-006",
            "question": "How do you approach code/work quality and maintainability in your projects?",
            "category": "technical",
            "difficulty": "intermediate",
            "interview_stage": "subject-matter-expertise",
            "tags": ["quality-standards", "maintainability", "best-practices"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Professional standards with long-term thinking",
        },
        {
            "id": "sme-007",
            "question": "Tell me about a time when you had to make architectural or design decisions for a complex system.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "subject-matter-expertise",
            "tags": ["architecture", "design-decisions", "systems-thinking"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Strategic technical thinking with scalability considerations",
        },
        {
            "id": "sme-008",
            "question": "Describe your experience with performance optimization and scalability challenges.",
            "category": "technical",
            "difficulty": "advanced",
            "interview_stage": "subject-matter-expertise",
            "tags": ["performance", "scalability", "optimization"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Efficient and scalable solution design mindset",
        },
        {
            "id": "sme-009",
            "question": "How do you approach knowledge sharing and documentation in technical projects?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "subject-matter-expertise",
            "tags": ["knowledge-sharing", "documentation", "collaboration"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Collaborative approach to knowledge and team capability building",
        },
        {
            "id": "sme-010",
            "question": "Tell me about a time when you had to integrate multiple systems or technologies.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "subject-matter-expertise",
            "tags": ["integration", "systems-architecture", "technical-complexity"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Holistic thinking about system interactions and dependencies",
        },
        {
            "id": "sme-011",
            "question": "Describe your approach to testing and quality assurance in your work.",
            "category": "technical",
            "difficulty": "intermediate",
            "interview_stage": "subject-matter-expertise",
            "tags": ["testing", "quality-assurance", "reliability"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Thorough and systematic approach to ensuring quality",
        },
        {
            "id": "sme-012",
            "question": "How do you handle technical debt and legacy system maintenance?",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "subject-matter-expertise",
            "tags": ["technical-debt", "legacy-systems", "maintenance"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Balanced approach to innovation and system maintenance",
        },
        {
            "id": "sme-013",
            "question": "Tell me about your experience with security considerations in your technical work.",
            "category": "technical",
            "difficulty": "intermediate",
            "interview_stage": "subject-matter-expertise",
            "tags": ["security", "risk-management", "compliance"],
            "expected_answer_time": 3,
            "star_method_relevant": True,
            "cultural_context": "Security-conscious development with compliance awareness",
        },
        {
            "id": "sme-014",
            "question": "Describe a time when you had to mentor or train others in technical concepts.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "subject-matter-expertise",
            "tags": ["mentoring", "knowledge-transfer", "technical-communication"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Patient and supportive technical mentorship approach",
        },
        {
            "id": "sme-015",
            "question": "How do you evaluate and select appropriate tools and technologies for projects?",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "subject-matter-expertise",
            "tags": ["technology-selection", "evaluation", "decision-making"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Pragmatic technology selection with business considerations",
        },
    ],

    "executive-final": [
        {
            "id": "ef-001",
            "question": "Describe your leadership philosophy and how it has evolved throughout your career.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["leadership-philosophy", "personal-growth", "management-style"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Thoughtful leadership approach with cultural sensitivity",
        },
        {
            "id": "ef-002",
            "question": "Tell me about a time when you had to lead an organization through a significant transformation.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["transformation", "change-leadership", "strategic-execution"],
            "expected_answer_time": 6,
            "star_method_relevant": True,
            "cultural_context": "Visionary leadership with stakeholder engagement and cultural awareness",
        },
        {
            "id": "ef-003",
            "question": "How do you approach building and maintaining strategic partnerships?",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["partnerships", "relationship-building", "strategic-alliances"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Long-term relationship building with mutual value creation",
        },
        {
            "id": "ef-004",
            "question": "Describe your experience with P&L responsibility and financial stewardship.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["p&l-management", "financial-stewardship", "business-acumen"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Responsible financial management with sustainable growth focus",
        },
        {
            "id": "ef-005",
            "question": "How do you develop and communicate a compelling vision for your organization?",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["vision-development", "strategic-communication", "inspiration"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Inspiring vision that resonates across diverse cultural backgrounds",
        },
        {
            "id": "ef-006",
            "question": "Tell me about a time when you had to make a decision that was unpopular but necessary.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["difficult-decisions", "courage", "leadership"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Principled decision-making with transparent communication",
        },
        {
            "id": "ef-007",
            "question": "How do you foster innovation and entrepreneurial thinking in large organizations?",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["innovation", "entrepreneurship", "culture-building"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Balanced approach to innovation with risk management",
        },
        {
            "id": "ef-008",
            "question": "Describe your approach to talent development and succession planning.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["talent-development", "succession-planning", "people-leadership"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Investment in people development with diverse career pathway support",
        },
        {
            "id": "ef-009",
            "question": "How do you navigate regulatory and compliance challenges in your industry?",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["regulatory-compliance", "risk-management", "governance"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Proactive compliance with ethical business practices",
        },
        {
            "id": "ef-010",
            "question": "Tell me about your experience with mergers, acquisitions, or major business integrations.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["m&a", "integration", "strategic-execution"],
            "expected_answer_time": 6,
            "star_method_relevant": True,
            "cultural_context": "Strategic integration with cultural sensitivity and people focus",
        },
        {
            "id": "ef-011",
            "question": "How do you ensure your organization remains competitive in a rapidly changing market?",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["competitive-strategy", "market-adaptation", "strategic-planning"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Agile strategic thinking with sustainable competitive advantages",
        },
        {
            "id": "ef-012",
            "question": "Describe your approach to corporate social responsibility and sustainability.",
            "category": "behavioral",
            "difficulty": "intermediate",
            "interview_stage": "executive-final",
            "tags": ["csr", "sustainability", "stakeholder-capitalism"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Commitment to social responsibility with business value alignment",
        },
        {
            "id": "ef-013",
            "question": "How do you build and maintain trust with your board of directors and investors?",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["board-relations", "investor-relations", "governance"],
            "expected_answer_time": 4,
            "star_method_relevant": True,
            "cultural_context": "Transparent and accountable leadership with regular communication",
        },
        {
            "id": "ef-014",
            "question": "Tell me about a crisis you've led your organization through and the lessons learned.",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["crisis-management", "resilience", "leadership-under-pressure"],
            "expected_answer_time": 6,
            "star_method_relevant": True,
            "cultural_context": "Calm and decisive crisis leadership with stakeholder communication",
        },
        {
            "id": "ef-015",
            "question": "How do you balance the needs of different stakeholders while driving business results?",
            "category": "behavioral",
            "difficulty": "advanced",
            "interview_stage": "executive-final",
            "tags": ["stakeholder-management", "balance", "business-results"],
            "expected_answer_time": 5,
            "star_method_relevant": True,
            "cultural_context": "Inclusive stakeholder consideration with principled decision-making",
        },
    ],
}
