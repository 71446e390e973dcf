"""Static job and skill catalog used by the onboarding pickers."""

JOB_CATEGORIES = ["Engineering", "Data", "Design", "Product", "Marketing", "Business", "Operations"]

SKILL_CATEGORIES = ["Programming", "Frameworks", "Data", "Cloud & DevOps", "Design", "Business", "Soft Skills"]

JOBS = [
    {"name": "Software Engineer", "category": "Engineering"},
    {"name": "Frontend Developer", "category": "Engineering"},
    {"name": "Backend Developer", "category": "Engineering"},
    {"name": "Full Stack Developer", "category": "Engineering"},
    {"name": "Mobile Developer", "category": "Engineering"},
    {"name": "DevOps Engineer", "category": "Engineering"},
    {"name": "Cloud Architect", "category": "Engineering"},
    {"name": "Security Engineer", "category": "Engineering"},
    {"name": "Data Scientist", "category": "Data"},
    {"name": "Data Analyst", "category": "Data"},
    {"name": "Data Engineer", "category": "Data"},
    {"name": "Machine Learning Engineer", "category": "Data"},
    {"name": "UX Designer", "category": "Design"},
    {"name": "UI Designer", "category": "Design"},
    {"name": "Product Designer", "category": "Design"},
    {"name": "Product Manager", "category": "Product"},
    {"name": "Project Manager", "category": "Product"},
    {"name": "Digital Marketer", "category": "Marketing"},
    {"name": "SEO Specialist", "category": "Marketing"},
    {"name": "Business Analyst", "category": "Business"},
    {"name": "Financial Analyst", "category": "Business"},
    {"name": "Operations Manager", "category": "Operations"},
]

SKILLS = [
    {"name": "Python", "category": "Programming"},
    {"name": "JavaScript", "category": "Programming"},
    {"name": "TypeScript", "category": "Programming"},
    {"name": "Java", "category": "Programming"},
    {"name": "Go", "category": "Programming"},
    {"name": "SQL", "category": "Programming"},
    {"name": "React", "category": "Frameworks"},
    {"name": "Node.js", "category": "Frameworks"},
    {"name": "Django", "category": "Frameworks"},
    {"name": "FastAPI", "category": "Frameworks"},
    {"name": "Pandas", "category": "Data"},
    {"name": "Machine Learning", "category": "Data"},
    {"name": "Data Visualization", "category": "Data"},
    {"name": "Statistics", "category": "Data"},
    {"name": "AWS", "category": "Cloud & DevOps"},
    {"name": "Docker", "category": "Cloud & DevOps"},
    {"name": "Kubernetes", "category": "Cloud & DevOps"},
    {"name": "Git", "category": "Cloud & DevOps"},
    {"name": "Figma", "category": "Design"},
    {"name": "User Research", "category": "Design"},
    {"name": "Excel", "category": "Business"},
    {"name": "Project Management", "category": "Business"},
    {"name": "Communication", "category": "Soft Skills"},
    {"name": "Leadership", "category": "Soft Skills"},
    {"name": "Problem Solving", "category": "Soft Skills"},
    {"name": "Teamwork", "category": "Soft Skills"},
]


def _search(entries: list[dict], query: str) -> list[dict]:
    q = (query or "").strip().lower()
    if not q:
        return list(entries)
    return [e for e in entries if q in e["name"].lower() or q in e["category"].lower()]


def search_jobs(query: str = "") -> list[dict]:
    return _search(JOBS, query)


def search_skills(query: str = "") -> list[dict]:
    return _search(SKILLS, query)
