"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories, and own transaction commits.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from skillroster.services.auth_service import AuthService
from skillroster.services.user_service import UserService
from skillroster.services.skill_service import SkillService, UserSkillService
from skillroster.services.seed_service import SeedService

__all__ = [
    "AuthService",
    "UserService",
    "SkillService",
    "UserSkillService",
    "SeedService",
]
