"""Repository instances for every content kind on the site."""
from portfolio_cms.config import settings
from portfolio_cms.models.about import About
from portfolio_cms.models.contact import ContactInfo
from portfolio_cms.models.experience import Experience, ExperienceTechnology
from portfolio_cms.models.hero import Hero
from portfolio_cms.models.project import Project, ProjectTechnology
from portfolio_cms.models.site_config import SiteConfig, DEFAULT_PRIMARY_COLOR
from portfolio_cms.models.skill import Skill, SkillCategory
from portfolio_cms.repositories.base import CRUDRepository, SingletonRepository
from portfolio_cms.repositories.contact_messages import ContactMessageRepository
from portfolio_cms.repositories.skills import SkillRepository
from portfolio_cms.repositories.technologies import TechnologyListRepository

def site_config_defaults():
    return {
        "site_name": "Portfolio",
        "setup_key": settings.DEFAULT_SETUP_KEY,
        "primary_color": DEFAULT_PRIMARY_COLOR,
        "meta_description": "Professional Portfolio Website",
    }

def hero_defaults():
    return {
        "greeting": "Hello, I'm",
        "name": "John Doe",
        "tagline": "Full Stack Developer & UI/UX Designer",
    }

def about_defaults():
    return {
        "bio": "I'm a passionate developer with experience building web applications.",
        "additional_info": "When I'm not coding, I enjoy learning new technologies and contributing to open source.",
        "profile_image": None,
        "details": [
            {"icon": "user", "label": "Name", "value": "John Doe"},
            {"icon": "mail", "label": "Email", "value": "hello@example.com"},
            {"icon": "map-pin", "label": "Location", "value": "Remote"},
        ],
        "social_links": [
            {"platform": "github", "url": "https://github.com", "icon": "github"},
            {"platform": "linkedin", "url": "https://linkedin.com", "icon": "linkedin"},
        ],
    }

def contact_info_defaults():
    return {
        "description": "Have a question or want to work together? Send me a message.",
        "email": "hello@example.com",
        "phone": None,
        "location": "Remote",
        "social_links": [
            {"platform": "github", "url": "https://github.com", "icon": "github"},
        ],
    }

site_config = SingletonRepository(SiteConfig, "Site configuration", site_config_defaults)
hero = SingletonRepository(Hero, "Hero data", hero_defaults)
about = SingletonRepository(About, "About data", about_defaults)
contact_info = SingletonRepository(ContactInfo, "Contact info", contact_info_defaults)

skill_categories = CRUDRepository(SkillCategory, "Skill category")
skills = SkillRepository(Skill, "Skill")
experiences = TechnologyListRepository(
    Experience,
    "Experience",
    ExperienceTechnology,
    "experience_id",
    order_by=[Experience.order, Experience.id],
)
projects = TechnologyListRepository(
    Project,
    "Project",
    ProjectTechnology,
    "project_id",
    order_by=[Project.order, Project.id],
)
contact_messages = ContactMessageRepository()
