from .user import User
from .section import Section, SECTION_TYPES
from .block import TextBlock, ImageBlock, CustomSectionContentBlock
from .project import ProjectItem, Category, project_categories, PROJECT_LAYOUTS
from .skill import SkillItem, SkillImage
from .experience import ExperienceItem, ExperienceDetailImage
from .education import EducationItem, EducationImage
from .testimonial import TestimonialItem
from .contact import ContactInfoItem, CONTACT_TYPES
from .setting import Setting, DEFAULT_SETTINGS
from .asset_deletion import PendingAssetDeletion
from .audit_log import AuditLog
