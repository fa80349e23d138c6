from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple


# Sentinels shared by search, extraction and enrichment
ALL_INDUSTRIES = "all"
DEFAULT_INDUSTRY = "general"
PLACEHOLDER_COMPANY = "LinkedIn Profile"
UNKNOWN_NAME = "Unknown Name"

LINKEDIN_SITE = "linkedin.com/in"
LINKEDIN_PROFILE_MARKER = "linkedin.com/in/"

# Only the first entries are used to build the OR-group of a query.
ROLE_KEYWORDS_PER_QUERY = 3


# Role titles per industry, most representative first.
INDUSTRY_ROLE_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "recruitment": (
        "Recruiter", "Talent Acquisition Specialist", "Technical Recruiter", "Corporate Recruiter",
        "Senior Recruiter", "Lead Recruiter", "Recruitment Manager", "Talent Acquisition Manager",
        "Recruitment Consultant", "Staffing Manager", "Recruitment Coordinator", "Talent Sourcer",
        "Executive Recruiter", "Executive Search Consultant", "Headhunter",
        "IT Recruiter", "Technology Recruiter", "Healthcare Recruiter", "Finance Recruiter",
        "Sales Recruiter", "University Recruiter", "Campus Recruiter", "Staffing Specialist",
    ),
    "technology": (
        "Software Engineer", "Developer", "Data Scientist", "Product Manager",
        "CTO", "Software Architect", "DevOps Engineer", "AI Engineer",
        "Machine Learning Engineer", "Cloud Architect", "IT Manager",
        "UX Designer", "QA Engineer", "Systems Administrator", "Network Engineer",
    ),
    "healthcare": (
        "Doctor", "Physician", "Surgeon", "Medical Director", "Healthcare Manager",
        "Nurse Practitioner", "Pharmacist", "Medical Researcher", "Hospital Administrator",
        "Dentist", "Therapist", "Healthcare Consultant", "Clinical Director",
    ),
    "finance": (
        "Financial Analyst", "Investment Banker", "Portfolio Manager", "CFO",
        "Accountant", "Financial Advisor", "Risk Manager", "Wealth Manager",
        "Bank Manager", "Credit Analyst", "Actuary", "Financial Controller",
    ),
    "education": (
        "Professor", "Teacher", "Educator", "Academic Dean", "School Principal",
        "Researcher", "Education Director", "Curriculum Developer", "Librarian",
    ),
    "manufacturing": (
        "Production Manager", "Operations Manager", "Quality Engineer",
        "Supply Chain Manager", "Manufacturing Engineer", "Plant Manager",
    ),
    "retail": (
        "Store Manager", "Retail Manager", "Sales Manager", "Merchandising Manager",
        "E-commerce Manager", "Brand Manager", "Marketing Manager",
    ),
    "real_estate": (
        "Real Estate Agent", "Property Manager", "Real Estate Broker",
        "Commercial Real Estate", "Real Estate Developer", "Leasing Agent",
    ),
    "energy": (
        "Energy Engineer", "Renewable Energy Specialist", "Oil and Gas Engineer",
        "Sustainability Manager", "Environmental Engineer", "Power Systems Engineer",
    ),
})


# Lowercase substrings scored against "<title> <snippet>" of a search result.
INDUSTRY_RELEVANCE_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "technology": ("software", "tech", "developer", "engineer", "data", "cloud", "ai", "machine learning"),
    "healthcare": ("health", "medical", "hospital", "doctor", "patient", "clinical", "pharma"),
    "finance": ("finance", "bank", "investment", "financial", "wealth", "accounting", "tax"),
    "education": ("education", "university", "school", "teacher", "professor", "academic"),
    "manufacturing": ("manufacturing", "production", "factory", "supply chain", "operations"),
    "retail": ("retail", "store", "sales", "merchandise", "e-commerce", "customer"),
    "real_estate": ("real estate", "property", "realtor", "broker", "commercial"),
    "energy": ("energy", "renewable", "solar", "wind", "oil", "gas", "power"),
})


def is_all_industries(industry: str | None) -> bool:
    return not industry or industry == ALL_INDUSTRIES


def role_keywords_for(industry: str | None) -> Tuple[str, ...]:
    if is_all_industries(industry):
        return ()
    return INDUSTRY_ROLE_KEYWORDS.get(industry, ())[:ROLE_KEYWORDS_PER_QUERY]


def relevance_keywords_for(industry: str | None) -> Tuple[str, ...]:
    if is_all_industries(industry):
        return ()
    return INDUSTRY_RELEVANCE_KEYWORDS.get(industry, ())
