from . import auth, site_config, sections, skills, experiences, projects, contact, setup_keys

__all__ = [
    "auth", "site_config", "sections", "skills", "experiences",
    "projects", "contact", "setup_keys",
]
