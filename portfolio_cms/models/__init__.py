from .user import User
from .session import UserSession
from .site_config import SiteConfig
from .hero import Hero
from .about import About
from .skill import SkillCategory, Skill
from .experience import Experience, ExperienceTechnology
from .project import Project, ProjectTechnology
from .contact import ContactInfo, ContactMessage
from .setup_key import SetupKey

__all__ = [
    "User", "UserSession", "SiteConfig", "Hero", "About",
    "SkillCategory", "Skill", "Experience", "ExperienceTechnology",
    "Project", "ProjectTechnology", "ContactInfo", "ContactMessage",
    "SetupKey",
]
