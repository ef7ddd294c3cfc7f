from .auth import *
from .site_config import *
from .sections import *
from .skill import *
from .experience import *
from .project import *
from .contact import *
from .setup_key import *

__all__ = [
    # Auth
    "Login", "Register", "UserResponse", "MessageResponse",

    # Site config
    "SiteConfigUpdate", "SiteConfigResponse",

    # Singleton sections
    "Detail", "SocialLink",
    "HeroUpdate", "HeroResponse",
    "AboutUpdate", "AboutResponse",
    "ContactInfoUpdate", "ContactInfoResponse",

    # Skills
    "SkillCategoryBase", "SkillCategoryCreate", "SkillCategoryUpdate", "SkillCategoryResponse",
    "SkillBase", "SkillCreate", "SkillUpdate", "SkillResponse",

    # Experience
    "ExperienceBase", "ExperienceCreate", "ExperienceUpdate", "ExperienceResponse",

    # Project
    "ProjectBase", "ProjectCreate", "ProjectUpdate", "ProjectResponse",

    # Contact messages
    "ContactMessageCreate", "ContactMessageResponse", "UnreadCount",

    # Setup keys
    "SetupKeyCreate", "SetupKeyResponse",
]
